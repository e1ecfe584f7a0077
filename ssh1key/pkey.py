"""
Key container entry points.

A PKey is a tagged holder: ``type`` says what kind of key ``data`` is.
The SSH1 loaders fill it only once a key has been parsed completely,
so a failed load leaves the container untouched.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union

from .core.config import LoaderConfig
from .core.crypto.rsa import RSAKeyMaterial
from .core.loaders import load_public, load_private
from .core.passphrase import PassphraseProvider


class KeyType(Enum):
    """Kinds of key a PKey can hold."""
    RSA = 'rsa'


@dataclass
class PKey:
    """Generic key container."""
    type: Optional[KeyType] = None
    data: Any = None

    @property
    def is_loaded(self) -> bool:
        """True once a key has been assigned."""
        return self.type is not None

    def assign(self, key_type: KeyType, data: Any) -> None:
        """Takes ownership of loaded key material."""
        self.type = key_type
        self.data = data

    @property
    def rsa(self) -> RSAKeyMaterial:
        """The held RSA material."""
        if self.type is not KeyType.RSA:
            raise TypeError(f"Container holds {self.type}, not an RSA key")
        return self.data


def ssh_load_public(k: PKey, data: Union[bytes, str]) -> PKey:
    """Loads an SSH1 public key into k."""
    material = load_public(data)
    k.assign(KeyType.RSA, material)
    return k


def ssh_load_private(
    k: PKey,
    data: bytes,
    passphrase_provider: Optional[PassphraseProvider] = None,
    config: Optional[LoaderConfig] = None
) -> PKey:
    """Loads an SSH1 private key into k."""
    material = load_private(data, passphrase_provider, config)
    k.assign(KeyType.RSA, material)
    return k
