"""
Key derivation from passphrases.
"""
from .passphrase_key_deriver import (
    SessionKeyDeriver,
    MD5SessionKeyDeriver,
    derive_session_key,
    to_buffer,
    wipe,
)

__all__ = [
    'SessionKeyDeriver',
    'MD5SessionKeyDeriver',
    'derive_session_key',
    'to_buffer',
    'wipe',
]
