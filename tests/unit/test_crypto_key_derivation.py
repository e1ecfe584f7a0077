"""Tests for passphrase key derivation."""
import hashlib

from ssh1key.core.crypto.key_derivation import (
    MD5SessionKeyDeriver, derive_session_key, to_buffer, wipe
)


class TestMD5SessionKeyDeriver:
    """Test suite for MD5SessionKeyDeriver."""

    def test_single_md5(self):
        """Test the key is one MD5 digest of the passphrase."""
        result = MD5SessionKeyDeriver().derive(b'correct horse')

        assert result == hashlib.md5(b'correct horse').digest()
        assert len(result) == 16

    def test_known_vector(self):
        """Test against the published MD5 of the empty string."""
        assert derive_session_key(b'').hex() == 'd41d8cd98f00b204e9800998ecf8427e'

    def test_str_and_bytes_agree(self):
        """Test str input is UTF-8 encoded."""
        assert derive_session_key('pässword') == derive_session_key('pässword'.encode())

    def test_bytearray_input(self):
        """Test bytearray input is accepted and not modified."""
        passphrase = bytearray(b'secret')

        result = derive_session_key(passphrase)

        assert result == hashlib.md5(b'secret').digest()
        assert passphrase == bytearray(b'secret')

    def test_key_size(self):
        """Test the advertised key size."""
        assert MD5SessionKeyDeriver.key_size == 16


class TestWipe:
    """Test suite for buffer wiping helpers."""

    def test_wipe_zeroes_in_place(self):
        """Test wipe overwrites every byte."""
        buffer = bytearray(b'secret')

        wipe(buffer)

        assert buffer == bytearray(6)

    def test_to_buffer_copies(self):
        """Test to_buffer returns an independent copy."""
        original = bytearray(b'abc')
        copy = to_buffer(original)

        wipe(copy)

        assert original == bytearray(b'abc')

    def test_to_buffer_encodes_str(self):
        """Test str passphrases are encoded."""
        assert to_buffer('abc') == bytearray(b'abc')
