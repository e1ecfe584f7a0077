"""
Serializers for SSH1 key files.
"""
from .public_writer import format_public
from .private_writer import dump_private

__all__ = [
    'format_public',
    'dump_private',
]
