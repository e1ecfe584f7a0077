"""Tests for the key container entry points."""
import pytest

from ssh1key import (
    PKey, KeyType, ssh_load_public, ssh_load_private,
    StaticPassphrase, dump_private,
    WrongPassphraseError, InvalidFormatError,
)


class TestPKey:
    """Test suite for PKey."""

    def test_starts_empty(self):
        """Test a new container holds nothing."""
        key = PKey()

        assert not key.is_loaded
        assert key.data is None

    def test_rsa_accessor_requires_rsa(self):
        """Test the rsa accessor refuses an empty container."""
        with pytest.raises(TypeError):
            PKey().rsa


class TestSSHLoadPublic:
    """Test suite for ssh_load_public."""

    def test_fills_container(self):
        """Test a parsed key is handed to the container."""
        key = ssh_load_public(PKey(), b'12 17 3233 toy@example')

        assert key.type is KeyType.RSA
        assert key.rsa.n == 3233

    def test_failure_leaves_container_empty(self):
        """Test nothing is assigned on failure."""
        key = PKey()

        with pytest.raises(InvalidFormatError):
            ssh_load_public(key, b'0 17 3233')

        assert not key.is_loaded


class TestSSHLoadPrivate:
    """Test suite for ssh_load_private."""

    def test_fills_container(self, toy_key):
        """Test a decrypted key is handed to the container."""
        data = dump_private(toy_key, passphrase='pw')

        key = ssh_load_private(PKey(), data, StaticPassphrase('pw'))

        assert key.type is KeyType.RSA
        assert key.rsa.is_private
        assert key.rsa.dmp1 == toy_key.dmp1

    def test_failure_keeps_previous_content(self, toy_key):
        """Test a failed load does not replace what the container holds."""
        key = ssh_load_public(PKey(), b'12 17 3233')
        previous = key.data
        data = dump_private(toy_key, passphrase='right', checksum=b'\x12\x34')

        with pytest.raises(WrongPassphraseError):
            ssh_load_private(key, data, StaticPassphrase('wrong'))

        assert key.data is previous
        assert not key.rsa.is_private
