"""Writer for the binary private key container."""
import struct


class BufferWriter:
    """Appends big-endian fields in the layout BufferReader reads."""

    def __init__(self):
        """Initializes an empty writer."""
        self._buf = bytearray()

    def __len__(self) -> int:
        return len(self._buf)

    def put_bytes(self, data: bytes) -> 'BufferWriter':
        """Appends raw bytes."""
        self._buf += data
        return self

    def put_byte(self, value: int) -> 'BufferWriter':
        """Appends an unsigned 8-bit integer."""
        self._buf.append(value)
        return self

    def put_uint16(self, value: int) -> 'BufferWriter':
        """Appends a big-endian unsigned 16-bit integer."""
        self._buf += struct.pack('>H', value)
        return self

    def put_uint32(self, value: int) -> 'BufferWriter':
        """Appends a big-endian unsigned 32-bit integer."""
        self._buf += struct.pack('>I', value)
        return self

    def put_bignum(self, value: int) -> 'BufferWriter':
        """Appends a big integer with its 2-byte bit count prefix."""
        if value < 0:
            raise ValueError("Only unsigned values are supported")
        bits = value.bit_length()
        if bits > 0xFFFF:
            raise ValueError(f"Integer of {bits} bits does not fit the prefix")
        self.put_uint16(bits)
        self._buf += value.to_bytes((bits + 7) // 8, byteorder='big')
        return self

    def put_string(self, data: bytes) -> 'BufferWriter':
        """Appends a string with its 4-byte length prefix."""
        self.put_uint32(len(data))
        self._buf += data
        return self

    def pad_to(self, block_size: int, fill: int = 0) -> 'BufferWriter':
        """Pads with fill bytes to a multiple of block_size."""
        while len(self._buf) % block_size:
            self._buf.append(fill)
        return self

    def getvalue(self) -> bytes:
        """Returns the written bytes."""
        return bytes(self._buf)
