"""Single-DES chaining strategies with explicit IV state."""
from abc import ABC, abstractmethod
from typing import Optional

from Crypto.Cipher import DES

BLOCK_SIZE = DES.block_size


class ChainStrategy(ABC):
    """Abstract base class for stateful block chaining strategies."""

    @abstractmethod
    def encrypt(self, data: bytes) -> bytes:
        """Encrypts data, advancing the chaining state."""
        pass

    @abstractmethod
    def decrypt(self, data: bytes) -> bytes:
        """Decrypts data, advancing the chaining state."""
        pass


class DESCBCChain(ChainStrategy):
    """
    DES-CBC whose IV carries over between calls.

    The IV is kept as a plain attribute so callers can copy it from one
    chain to another, which the legacy triple-DES construction needs.
    """

    def __init__(self, key: bytes, iv: Optional[bytes] = None):
        """Initializes the chain with an 8-byte key and optional IV."""
        if len(key) != BLOCK_SIZE:
            raise ValueError(f"DES key must be {BLOCK_SIZE} bytes")
        self._key = bytearray(key)
        self.iv = bytes(iv) if iv is not None else b'\0' * BLOCK_SIZE

    def _check(self, data: bytes) -> None:
        if len(data) % BLOCK_SIZE:
            raise ValueError(
                f"Data length {len(data)} is not a multiple of {BLOCK_SIZE}"
            )

    def encrypt(self, data: bytes) -> bytes:
        """Encrypts using DES-CBC mode from the current IV."""
        self._check(data)
        if not data:
            return b''
        cipher = DES.new(self._key, DES.MODE_CBC, self.iv)
        out = cipher.encrypt(data)
        self.iv = out[-BLOCK_SIZE:]
        return out

    def decrypt(self, data: bytes) -> bytes:
        """Decrypts using DES-CBC mode from the current IV."""
        self._check(data)
        if not data:
            return b''
        cipher = DES.new(self._key, DES.MODE_CBC, self.iv)
        out = cipher.decrypt(data)
        self.iv = bytes(data[-BLOCK_SIZE:])
        return out

    def wipe(self) -> None:
        """Zeroes the stored key."""
        for i in range(len(self._key)):
            self._key[i] = 0
