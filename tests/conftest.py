"""Pytest fixtures for ssh1key tests."""
import pytest
from Crypto.PublicKey import RSA
from Crypto.Random import get_random_bytes

from ssh1key.core.codec.writer import BufferWriter
from ssh1key.core.config import SSH1_MAGIC
from ssh1key.core.crypto.rsa import RSAKeyMaterial


@pytest.fixture
def session_key():
    """Generates a 16-byte session key for testing."""
    return get_random_bytes(16)


@pytest.fixture
def toy_key():
    """Returns a textbook RSA key (p=61, q=53)."""
    p, q, d = 61, 53, 2753
    return RSAKeyMaterial(
        n=p * q,
        e=17,
        d=d,
        p=p,
        q=q,
        iqmp=pow(q, -1, p),
        dmp1=d % (p - 1),
        dmq1=d % (q - 1),
        comment='toy@example'
    )


@pytest.fixture(scope='session')
def real_key():
    """Returns a freshly generated 1024-bit key as RSAKeyMaterial."""
    key = RSA.generate(1024)
    return RSAKeyMaterial(
        n=key.n,
        e=key.e,
        d=key.d,
        p=key.p,
        q=key.q,
        iqmp=pow(key.q, -1, key.p),
        dmp1=key.d % (key.p - 1),
        dmq1=key.d % (key.q - 1),
        comment='user@host'
    )


@pytest.fixture
def key_header():
    """Builds the clear part of a private key file by hand."""
    def build(
        n=3233,
        e=17,
        comment=b'toy@example',
        cipher_type=0,
        bits=12,
        magic=SSH1_MAGIC
    ):
        writer = BufferWriter()
        writer.put_bytes(magic)
        writer.put_byte(cipher_type)
        writer.put_uint32(0)
        writer.put_uint32(bits)
        writer.put_bignum(n)
        writer.put_bignum(e)
        writer.put_string(comment)
        return writer.getvalue()
    return build


@pytest.fixture
def private_body():
    """Builds the private part of a key file by hand."""
    def build(checksum=b'\xab\xcd\xab\xcd', d=2753, iqmp=38, q=53, p=61, pad=True):
        writer = BufferWriter()
        writer.put_bytes(checksum)
        writer.put_bignum(d)
        writer.put_bignum(iqmp)
        writer.put_bignum(q)
        writer.put_bignum(p)
        if pad:
            writer.pad_to(8)
        return writer.getvalue()
    return build
