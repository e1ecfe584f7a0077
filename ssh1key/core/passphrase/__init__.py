"""
Passphrase providers for encrypted private keys.
"""
from .protocols import PassphraseProvider, PassphraseAnswer
from .static import StaticPassphrase

__all__ = [
    'PassphraseProvider',
    'PassphraseAnswer',
    'StaticPassphrase',
]
