"""Unsigned decimal scanner for the text public key format."""
from typing import Tuple, Union

from ..exceptions import InvalidFormatError

BLANKS = b' \t'
DIGITS = b'0123456789'

# int() and str() refuse more than 4300 digits by default
CHUNK_DIGITS = 1000


def digits_to_int(digits: bytes) -> int:
    """Converts an ASCII digit run of any length to an int."""
    value = 0
    for start in range(0, len(digits), CHUNK_DIGITS):
        chunk = digits[start:start + CHUNK_DIGITS]
        value = value * 10 ** len(chunk) + int(chunk)
    return value


def int_to_digits(value: int) -> str:
    """Formats a non-negative int of any size in decimal."""
    if value < 0:
        raise ValueError("Only unsigned values are supported")
    base = 10 ** CHUNK_DIGITS
    chunks = []
    while value >= base:
        value, low = divmod(value, base)
        chunks.append(str(low).zfill(CHUNK_DIGITS))
    chunks.append(str(value))
    return ''.join(reversed(chunks))


class DecimalScanner:
    """
    Cursor over immutable text that yields unsigned decimal integers.

    Example:
        >>> scanner = DecimalScanner(b"1024 35 12345 user@host")
        >>> scanner.scan_bignum()
        1024
        >>> scanner.rest()
        b' 35 12345 user@host'
    """

    def __init__(self, data: Union[bytes, str], pos: int = 0):
        """Initializes the scanner, encoding str input as UTF-8."""
        if isinstance(data, str):
            data = data.encode('utf-8')
        self.data = bytes(data)
        self.pos = pos

    def skip_blanks(self) -> None:
        """Moves the cursor past spaces and tabs."""
        while self.pos < len(self.data) and self.data[self.pos] in BLANKS:
            self.pos += 1

    def at_digit(self) -> bool:
        """Tells whether the cursor sits on an ASCII digit."""
        return self.pos < len(self.data) and self.data[self.pos] in DIGITS

    def scan_bignum(self) -> int:
        """
        Scans one unsigned decimal integer.

        Leading blanks are skipped. The cursor ends just past the last
        digit of the maximal digit run.

        Raises:
            InvalidFormatError: If no digit follows the blanks
        """
        self.skip_blanks()
        if not self.at_digit():
            raise InvalidFormatError(
                f"Expected decimal digit at offset {self.pos}"
            )
        start = self.pos
        while self.at_digit():
            self.pos += 1
        return digits_to_int(self.data[start:self.pos])

    def rest(self) -> bytes:
        """Returns the unscanned remainder."""
        return self.data[self.pos:]


def scan_decimal_bignum(data: Union[bytes, str], pos: int = 0) -> Tuple[int, int]:
    """Scans a decimal integer at pos and returns (value, new_pos)."""
    scanner = DecimalScanner(data, pos)
    value = scanner.scan_bignum()
    return value, scanner.pos
