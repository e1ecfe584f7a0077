"""
Passphrase provider protocol.

Defines the interface the private key loader uses to ask for a
passphrase. Prompting, echo suppression and re-prompt loops belong to
the implementation.
"""
from typing import Protocol, Optional, Union, runtime_checkable

PassphraseAnswer = Optional[Union[str, bytes, bytearray]]


@runtime_checkable
class PassphraseProvider(Protocol):
    """
    Protocol for passphrase providers.

    Any callable taking a prompt label qualifies, so a plain function
    or a lambda works as well as a class.
    """

    def __call__(self, prompt: str) -> PassphraseAnswer:
        """
        Ask for the passphrase of an encrypted key.

        Args:
            prompt: Label naming the key, e.g.
                "Enter SSH passphrase for user@host: "

        Returns:
            The passphrase, or None if the user cancelled. A bytearray
            is wiped by the loader once digested.

        Raises:
            OperationCancelledError: If the user cancelled
        """
        ...
