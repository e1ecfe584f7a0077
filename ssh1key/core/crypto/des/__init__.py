"""
DES-based ciphers used by the SSH1 private key format.
"""
from .strategies import ChainStrategy, DESCBCChain, BLOCK_SIZE
from .legacy_des3 import LegacyDES3Cipher

__all__ = [
    'ChainStrategy',
    'DESCBCChain',
    'LegacyDES3Cipher',
    'BLOCK_SIZE',
]
