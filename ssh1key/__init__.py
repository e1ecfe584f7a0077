"""
ssh1key - Loader for legacy SSH1 RSA key files.

Usage:
    >>> from ssh1key import load_private, StaticPassphrase
    >>>
    >>> with open("identity", "rb") as f:
    ...     key = load_private(f.read(), StaticPassphrase("secret"))
    >>> key.dmp1 == key.d % (key.p - 1)
    True
"""
import logging

from .core.logging import configure_loggers
from .core.config import LoaderConfig, CipherType, SSH1_MAGIC
from .core.crypto.rsa import RSAKeyMaterial
from .core.loaders import load_public, load_private, PrivateKeyLoader
from .core.serializers import format_public, dump_private
from .core.passphrase import PassphraseProvider, StaticPassphrase
from .core.exceptions import (
    SSH1KeyError,
    TruncatedInputError,
    InvalidFormatError,
    BufferTooSmallError,
    BadMagicError,
    WrongPassphraseError,
    OperationCancelledError,
)
from .pkey import PKey, KeyType, ssh_load_public, ssh_load_private

__version__ = '1.0.0'


def setup_logging(level=logging.INFO):
    """
    Configure logging for ssh1key modules.

    Args:
        level: Logging level (default: logging.INFO)
    """
    configure_loggers(level)


__all__ = [
    'LoaderConfig',
    'CipherType',
    'SSH1_MAGIC',
    'RSAKeyMaterial',
    'load_public',
    'load_private',
    'PrivateKeyLoader',
    'format_public',
    'dump_private',
    'PassphraseProvider',
    'StaticPassphrase',
    'SSH1KeyError',
    'TruncatedInputError',
    'InvalidFormatError',
    'BufferTooSmallError',
    'BadMagicError',
    'WrongPassphraseError',
    'OperationCancelledError',
    'PKey',
    'KeyType',
    'ssh_load_public',
    'ssh_load_private',
    'setup_logging',
]
