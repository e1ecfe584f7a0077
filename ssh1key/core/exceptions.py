"""
Custom exceptions for SSH1 key loading.

This module defines exception classes raised while parsing legacy
version-1 public and private key files.
"""
from typing import Optional


class SSH1KeyError(Exception):
    """Base exception for all SSH1 key errors."""

    def __init__(self, message: str, error_code: Optional[int] = None) -> None:
        """
        Initialize the exception.

        Args:
            message: Error message
            error_code: Numeric error code (if available)
        """
        self.error_code = error_code
        super().__init__(message)


class TruncatedInputError(SSH1KeyError):
    """Exception raised when a field runs past the end of the buffer."""
    pass


class InvalidFormatError(SSH1KeyError):
    """Exception raised when the input does not follow the key format."""
    pass


class BadMagicError(InvalidFormatError):
    """Exception raised when a private key file lacks the SSH1 identifier."""
    pass


class BufferTooSmallError(SSH1KeyError):
    """Exception raised when a declared length exceeds the field capacity."""

    def __init__(
        self,
        message: str,
        declared: Optional[int] = None,
        capacity: Optional[int] = None,
        error_code: Optional[int] = None
    ) -> None:
        """
        Initialize the exception.

        Args:
            message: Error message
            declared: Length announced by the input
            capacity: Maximum length accepted for the field
            error_code: Numeric error code (if available)
        """
        self.declared = declared
        self.capacity = capacity
        super().__init__(message, error_code)


class WrongPassphraseError(SSH1KeyError):
    """Exception raised when the decrypted checksum does not match."""

    def __init__(
        self,
        message: str,
        comment: Optional[str] = None,
        error_code: Optional[int] = None
    ) -> None:
        """
        Initialize the exception.

        Args:
            message: Error message
            comment: Comment of the key that failed to decrypt
            error_code: Numeric error code (if available)
        """
        self.comment = comment
        super().__init__(message, error_code)


class OperationCancelledError(SSH1KeyError):
    """Exception raised when the passphrase prompt is cancelled."""
    pass
