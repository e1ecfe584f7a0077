"""
Loaders for SSH1 key files.
"""
from .public_loader import load_public
from .private_loader import PrivateKeyLoader, load_private

__all__ = [
    'load_public',
    'load_private',
    'PrivateKeyLoader',
]
