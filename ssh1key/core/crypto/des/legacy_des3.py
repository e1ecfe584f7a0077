"""
SSH1 triple-DES.

This is three independent DES-CBC passes with their own IVs, not
EDE3-CBC. Decryption runs the passes inner-CBC style:

    iv1 <- iv2
    decrypt(k3, iv3) -> encrypt(k2, iv2) -> decrypt(k1, iv1)

and encryption is the mirror image. A library triple-DES mode gives
different output and cannot read files written this way.
"""
from typing import Tuple, Union

from ...exceptions import InvalidFormatError
from ...logging import get_logger
from .strategies import DESCBCChain, BLOCK_SIZE

logger = get_logger(__name__)


class LegacyDES3Cipher:
    """
    Stateful SSH1 triple-DES transform.

    Keys are taken from a 16 or 24 byte session key: k1 and k2 are the
    first two 8-byte slices, k3 is the third slice or k1 again for a
    16-byte key. All three IVs start at zero and chain across calls.

    Example:
        >>> cipher = LegacyDES3Cipher(session_key)
        >>> plaintext = cipher.decrypt(ciphertext)
    """

    def __init__(self, session_key: Union[bytes, bytearray]):
        """Builds the three DES chains from a session key."""
        if len(session_key) not in (16, 24):
            raise ValueError(
                f"Session key must be 16 or 24 bytes, got {len(session_key)}"
            )
        # views, so the only key copies are the ones the chains can wipe
        view = memoryview(session_key)
        k1 = view[0:8]
        k2 = view[8:16]
        k3 = view[0:8] if len(view) <= 16 else view[16:24]
        self._chain1 = DESCBCChain(k1)
        self._chain2 = DESCBCChain(k2)
        self._chain3 = DESCBCChain(k3)

    @property
    def ivs(self) -> Tuple[bytes, bytes, bytes]:
        """Current (iv1, iv2, iv3)."""
        return self._chain1.iv, self._chain2.iv, self._chain3.iv

    def wipe(self) -> None:
        """Zeroes the key copies held by the three chains."""
        for chain in (self._chain1, self._chain2, self._chain3):
            chain.wipe()

    def _check(self, data: bytes) -> None:
        if len(data) % BLOCK_SIZE:
            raise InvalidFormatError(
                f"Ciphertext length {len(data)} is not a multiple of "
                f"the DES block size"
            )

    def decrypt(self, data: bytes) -> bytes:
        """Decrypts data."""
        self._check(data)
        logger.debug(f"Legacy 3DES decrypt of {len(data)} bytes")
        self._chain1.iv = self._chain2.iv
        scratch = self._chain3.decrypt(data)
        scratch = self._chain2.encrypt(scratch)
        return self._chain1.decrypt(scratch)

    def encrypt(self, data: bytes) -> bytes:
        """Encrypts data; inverse of decrypt() for matching IV state."""
        self._check(data)
        logger.debug(f"Legacy 3DES encrypt of {len(data)} bytes")
        self._chain1.iv = self._chain2.iv
        scratch = self._chain1.encrypt(data)
        scratch = self._chain2.decrypt(scratch)
        return self._chain3.encrypt(scratch)
