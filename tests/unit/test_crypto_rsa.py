"""Tests for RSA key material and CRT derivation."""
import math

import pytest
from Crypto.PublicKey import RSA
from cryptography.hazmat.primitives.asymmetric import rsa

from ssh1key.core.crypto.rsa import RSAKeyMaterial, derive_crt_exponents


class TestDeriveCrtExponents:
    """Test suite for derive_crt_exponents."""

    @pytest.mark.parametrize(
        'd', [d for d in range(1, 240) if math.gcd(d, 60) == 1]
    )
    def test_small_primes(self, d):
        """Test p=11, q=13 gives d mod 10 and d mod 12."""
        dmp1, dmq1 = derive_crt_exponents(d, 11, 13)

        assert dmp1 == d % 10
        assert dmq1 == d % 12

    def test_textbook_key(self):
        """Test the textbook p=61, q=53 example."""
        assert derive_crt_exponents(2753, 61, 53) == (53, 49)

    def test_rejects_degenerate_factors(self):
        """Test factors below 2 are refused."""
        with pytest.raises(ValueError):
            derive_crt_exponents(7, 1, 13)


class TestRSAKeyMaterial:
    """Test suite for RSAKeyMaterial."""

    def test_public_only(self):
        """Test a public key has no private part."""
        material = RSAKeyMaterial(n=3233, e=17)

        assert not material.is_private
        assert material.size_in_bits == 12

    def test_private(self, toy_key):
        """Test a complete private key."""
        assert toy_key.is_private
        assert toy_key.dmp1 == 53
        assert toy_key.dmq1 == 49

    def test_incomplete_private_part_rejected(self):
        """Test partial private components raise ValueError."""
        with pytest.raises(ValueError, match="complete"):
            RSAKeyMaterial(n=3233, e=17, d=2753)

    def test_public_key_strips_private_fields(self, toy_key):
        """Test public_key keeps n, e, bits and comment."""
        public = toy_key.public_key()

        assert not public.is_private
        assert (public.n, public.e, public.comment) == (toy_key.n, toy_key.e, toy_key.comment)

    def test_immutable(self, toy_key):
        """Test fields cannot be reassigned."""
        with pytest.raises(AttributeError):
            toy_key.d = 1

    def test_repr_hides_components(self, toy_key):
        """Test repr does not print the private exponent."""
        text = repr(toy_key)

        assert 'private' in text
        assert '2753' not in text

    def test_to_pycryptodome(self, real_key):
        """Test conversion to a PyCryptodome key."""
        key = real_key.to_pycryptodome()

        assert isinstance(key, RSA.RsaKey)
        assert key.has_private()
        assert (key.n, key.e, key.d) == (real_key.n, real_key.e, real_key.d)

    def test_to_pycryptodome_public(self, real_key):
        """Test public material converts to a public key."""
        key = real_key.public_key().to_pycryptodome()

        assert not key.has_private()

    def test_to_cryptography(self, real_key):
        """Test conversion to a cryptography key."""
        key = real_key.to_cryptography()

        assert isinstance(key, rsa.RSAPrivateKey)
        numbers = key.private_numbers()
        assert numbers.dmp1 == real_key.dmp1
        assert numbers.dmq1 == real_key.dmq1
        assert numbers.iqmp == real_key.iqmp

    def test_to_cryptography_public(self, real_key):
        """Test public material converts to a public key."""
        key = real_key.public_key().to_cryptography()

        assert isinstance(key, rsa.RSAPublicKey)
        assert key.public_numbers().n == real_key.n
