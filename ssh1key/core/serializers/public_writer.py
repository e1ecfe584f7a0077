"""Writer for the SSH1 public key text format."""
from typing import Optional

from ..codec.decimal import int_to_digits
from ..crypto.rsa import RSAKeyMaterial


def format_public(material: RSAKeyMaterial, comment: Optional[str] = None) -> str:
    """
    Formats a public key line without trailing newline.

    The bit count is the one recorded in material, or the modulus
    length when none was recorded. comment overrides material.comment.
    """
    bits = material.bits or material.size_in_bits
    fields = [str(bits), int_to_digits(material.e), int_to_digits(material.n)]
    comment = comment if comment is not None else material.comment
    if comment:
        fields.append(comment)
    return ' '.join(fields)
