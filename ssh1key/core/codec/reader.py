"""Bounds-checked reader for the binary private key container."""
import struct
from typing import Callable, Union

from ..exceptions import TruncatedInputError, BufferTooSmallError


class BufferReader:
    """
    Reads big-endian fields from a private copy of the input.

    The cursor only moves forward. The tail of the buffer can be
    replaced in place once (decryption); everything else is read-only.

    Example:
        >>> reader = BufferReader(data)
        >>> n = reader.read_bignum()
        >>> comment = reader.read_string(8192)
    """

    def __init__(self, data: Union[bytes, bytearray, memoryview]):
        """Initializes the reader with a copy of data."""
        self._buf = bytearray(data)
        self._pos = 0

    @property
    def position(self) -> int:
        """Current cursor offset."""
        return self._pos

    @property
    def remaining(self) -> int:
        """Number of unread bytes."""
        return len(self._buf) - self._pos

    def _require(self, count: int, what: str) -> None:
        if count > self.remaining:
            raise TruncatedInputError(
                f"Truncated {what}: need {count} bytes at offset "
                f"{self._pos}, {self.remaining} available"
            )

    def peek(self, count: int) -> bytes:
        """Returns the next count bytes without consuming them."""
        self._require(count, 'field')
        return bytes(self._buf[self._pos:self._pos + count])

    def read_bytes(self, count: int, what: str = 'field') -> bytes:
        """Reads exactly count bytes."""
        self._require(count, what)
        chunk = bytes(self._buf[self._pos:self._pos + count])
        self._pos += count
        return chunk

    def skip(self, count: int, what: str = 'field') -> None:
        """Advances the cursor by count bytes."""
        self._require(count, what)
        self._pos += count

    def read_byte(self) -> int:
        """Reads an unsigned 8-bit integer."""
        self._require(1, 'byte')
        value = self._buf[self._pos]
        self._pos += 1
        return value

    def read_uint16(self) -> int:
        """Reads a big-endian unsigned 16-bit integer."""
        return struct.unpack('>H', self.read_bytes(2, 'uint16'))[0]

    def read_uint32(self) -> int:
        """Reads a big-endian unsigned 32-bit integer."""
        return struct.unpack('>I', self.read_bytes(4, 'uint32'))[0]

    def read_bignum(self) -> int:
        """
        Reads a length-prefixed big integer.

        The prefix is a 2-byte bit count; the magnitude follows in
        ceil(bits / 8) big-endian bytes.

        Raises:
            TruncatedInputError: If the prefix or magnitude is missing
        """
        bits = self.read_uint16()
        magnitude = self.read_bytes((bits + 7) // 8, 'bignum')
        return int.from_bytes(magnitude, byteorder='big')

    def read_string(self, max_len: int) -> bytes:
        """
        Reads a 4-byte length-prefixed string.

        Args:
            max_len: Capacity of the destination

        Raises:
            TruncatedInputError: If the declared length exceeds the input
            BufferTooSmallError: If the declared length exceeds max_len
        """
        length = self.read_uint32()
        self._require(length, 'string')
        if length > max_len:
            raise BufferTooSmallError(
                f"String of {length} bytes exceeds capacity of {max_len}",
                declared=length,
                capacity=max_len
            )
        return self.read_bytes(length, 'string')

    def decrypt_remaining(
        self,
        transform: Callable[[bytes], bytes],
        block_size: int = 1
    ) -> None:
        """
        Replaces the unread tail with transform(tail), in place.

        Only the longest prefix made of whole blocks is transformed; a
        partial trailing block is left as it is.
        """
        end = self._pos + self.remaining // block_size * block_size
        tail = bytes(self._buf[self._pos:end])
        plain = transform(tail)
        if len(plain) != len(tail):
            raise ValueError("Transform must preserve length")
        self._buf[self._pos:end] = plain

    def wipe(self) -> None:
        """Zeroes the buffer and moves the cursor to its end."""
        for i in range(len(self._buf)):
            self._buf[i] = 0
        self._pos = len(self._buf)
