"""Crypto module for the SSH1 key formats."""
from .des import DESCBCChain, LegacyDES3Cipher
from .key_derivation import SessionKeyDeriver, MD5SessionKeyDeriver, derive_session_key
from .rsa import RSAKeyMaterial, derive_crt_exponents

__all__ = [
    'DESCBCChain',
    'LegacyDES3Cipher',
    'SessionKeyDeriver',
    'MD5SessionKeyDeriver',
    'derive_session_key',
    'RSAKeyMaterial',
    'derive_crt_exponents',
]
