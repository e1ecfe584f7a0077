"""
Fixed passphrase provider.

Answers every prompt with a passphrase known in advance.
"""
from typing import List, Union

from .protocols import PassphraseProvider


class StaticPassphrase(PassphraseProvider):
    """
    Provider that always returns the same passphrase.

    Each call hands out a fresh bytearray copy, so the loader can wipe
    it without touching the stored value. Prompts are recorded in
    ``prompts``.

    Useful for:
    - Unit testing
    - Batch tools that read the passphrase from elsewhere

    Example:
        >>> provider = StaticPassphrase("secret")
        >>> material = load_private(data, provider)
    """

    def __init__(self, passphrase: Union[str, bytes]):
        """Initialize with the passphrase to hand out."""
        if isinstance(passphrase, str):
            passphrase = passphrase.encode()
        self._passphrase = bytes(passphrase)
        self.prompts: List[str] = []

    def __call__(self, prompt: str) -> bytearray:
        """
        Return a copy of the passphrase.

        Args:
            prompt: Label naming the key

        Returns:
            Passphrase bytes
        """
        self.prompts.append(prompt)
        return bytearray(self._passphrase)
