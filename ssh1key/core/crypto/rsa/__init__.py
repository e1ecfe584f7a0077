"""RSA key material module."""
from .rsa_key import RSAKeyMaterial
from .crt import derive_crt_exponents

__all__ = [
    'RSAKeyMaterial',
    'derive_crt_exponents',
]
