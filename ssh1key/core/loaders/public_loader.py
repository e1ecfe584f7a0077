"""Loader for the SSH1 public key text format."""
from typing import Union

from ..codec.decimal import DecimalScanner
from ..crypto.rsa import RSAKeyMaterial
from ..exceptions import InvalidFormatError
from ..logging import get_logger

logger = get_logger(__name__)


def load_public(data: Union[bytes, str]) -> RSAKeyMaterial:
    """
    Parses a public key line: ``<bits> <exponent> <modulus> [comment]``.

    Fields are unsigned decimal numbers separated by spaces or tabs.
    Whatever follows the modulus on the first line, stripped, is the
    comment.

    Args:
        data: Contents of the public key file

    Returns:
        Key material holding n and e

    Raises:
        InvalidFormatError: If a field is not a decimal number or the
            bit count is zero
    """
    scanner = DecimalScanner(data)
    scanner.skip_blanks()
    if not scanner.at_digit():
        raise InvalidFormatError("Public key must start with the bit count")
    bits = scanner.scan_bignum()
    if bits == 0:
        raise InvalidFormatError("Public key bit count is zero")

    e = scanner.scan_bignum()
    n = scanner.scan_bignum()

    line = scanner.rest().split(b'\n', 1)[0]
    comment = line.strip(b' \t\r').decode('utf-8', errors='replace') or None

    logger.debug(f"Loaded SSH1 public key: bits={bits}, modulus={n.bit_length()} bits")
    return RSAKeyMaterial(n=n, e=e, bits=bits, comment=comment)
