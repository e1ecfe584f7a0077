"""Passphrase-based session key derivation using Strategy Pattern."""
from abc import ABC, abstractmethod
import hashlib
from typing import Union

Passphrase = Union[str, bytes, bytearray]


def wipe(buffer: bytearray) -> None:
    """Overwrites a mutable buffer with zeros."""
    for i in range(len(buffer)):
        buffer[i] = 0


def to_buffer(passphrase: Passphrase) -> bytearray:
    """Copies a passphrase into a wipeable buffer."""
    if isinstance(passphrase, str):
        return bytearray(passphrase.encode())
    return bytearray(passphrase)


class SessionKeyDeriver(ABC):
    """Abstract base class for passphrase to session key derivation."""

    key_size: int

    @abstractmethod
    def derive(self, passphrase: Passphrase) -> bytes:
        """Derives a session key from a passphrase."""
        pass


class MD5SessionKeyDeriver(SessionKeyDeriver):
    """
    Legacy SSH1 derivation: one MD5 over the raw passphrase.

    No salt and no iteration count; the format defines it this way and
    existing key files depend on it.
    """

    key_size = 16

    def derive(self, passphrase: Passphrase) -> bytes:
        """Derives a 16-byte session key, wiping the working copy."""
        buffer = to_buffer(passphrase)
        try:
            return hashlib.md5(buffer).digest()
        finally:
            wipe(buffer)


def derive_session_key(passphrase: Passphrase) -> bytes:
    """Derives the 16-byte session key for a passphrase."""
    return MD5SessionKeyDeriver().derive(passphrase)
