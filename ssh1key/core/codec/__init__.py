"""
Field codecs for the legacy key formats.
"""
from .reader import BufferReader
from .writer import BufferWriter
from .decimal import DecimalScanner, scan_decimal_bignum, digits_to_int, int_to_digits

__all__ = [
    'BufferReader',
    'BufferWriter',
    'DecimalScanner',
    'scan_decimal_bignum',
    'digits_to_int',
    'int_to_digits',
]
