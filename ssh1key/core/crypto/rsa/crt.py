"""Chinese Remainder Theorem parameters."""
from typing import Tuple


def derive_crt_exponents(d: int, p: int, q: int) -> Tuple[int, int]:
    """
    Computes the CRT exponents of a private key.

    Args:
        d: Private exponent
        p: First prime factor
        q: Second prime factor

    Returns:
        (dmp1, dmq1) with dmp1 = d mod (p - 1) and dmq1 = d mod (q - 1)

    Raises:
        ValueError: If a factor is smaller than 2
    """
    if p < 2 or q < 2:
        raise ValueError("Prime factors must be at least 2")
    return d % (p - 1), d % (q - 1)
