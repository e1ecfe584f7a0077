"""
Loader configuration module.

Collects the constants of the legacy key layout that callers may need
to override, such as the comment capacity or the prompt wording.
"""
from dataclasses import dataclass
from enum import IntEnum


SSH1_MAGIC = b'SSH PRIVATE KEY FILE FORMAT 1.1\n\0'


class CipherType(IntEnum):
    """Cipher numbers of the SSH1 protocol; any non-zero value means 3DES here."""
    NONE = 0
    IDEA = 1
    DES = 2
    THREE_DES = 3
    BLOWFISH = 6

# Historical BUFSIZ used for the comment field
DEFAULT_COMMENT_CAPACITY = 8192

DEFAULT_PROMPT_TEMPLATE = 'Enter SSH passphrase for {comment}: '


@dataclass(frozen=True)
class LoaderConfig:
    """
    Configuration for the SSH1 key loaders.

    Attributes:
        magic: Identifier expected at the start of a private key file,
            including its trailing NUL
        comment_capacity: Largest comment length accepted, in bytes
        prompt_template: Label passed to the passphrase provider;
            ``{comment}`` is replaced with the key comment
        comment_encoding: Encoding used to turn the comment into text
    """
    magic: bytes = SSH1_MAGIC
    comment_capacity: int = DEFAULT_COMMENT_CAPACITY
    prompt_template: str = DEFAULT_PROMPT_TEMPLATE
    comment_encoding: str = 'utf-8'

    def __post_init__(self):
        if not self.magic:
            raise ValueError("Magic cannot be empty")
        if self.comment_capacity < 0:
            raise ValueError("Comment capacity cannot be negative")

    @classmethod
    def default(cls) -> 'LoaderConfig':
        """Create default configuration."""
        return cls()

    @classmethod
    def with_comment_capacity(cls, capacity: int, **kwargs) -> 'LoaderConfig':
        """Create configuration with a custom comment capacity."""
        return cls(comment_capacity=capacity, **kwargs)

    def decode_comment(self, comment: bytes) -> str:
        """Decodes a raw comment for display."""
        return comment.decode(self.comment_encoding, errors='replace')

    def format_prompt(self, comment: str) -> str:
        """Builds the passphrase prompt label for a key comment."""
        return self.prompt_template.format(comment=comment)
