"""Writer for the SSH1 private key container."""
from typing import Optional, Union

from Crypto.Random import get_random_bytes

from ..codec.writer import BufferWriter
from ..config import LoaderConfig, CipherType
from ..crypto.des import LegacyDES3Cipher, BLOCK_SIZE
from ..crypto.key_derivation import MD5SessionKeyDeriver
from ..crypto.rsa import RSAKeyMaterial
from ..logging import get_logger

logger = get_logger(__name__)


def dump_private(
    material: RSAKeyMaterial,
    passphrase: Optional[Union[str, bytes]] = None,
    checksum: Optional[bytes] = None,
    config: Optional[LoaderConfig] = None
) -> bytes:
    """
    Serializes a private key into the SSH1 container.

    Args:
        material: Complete private key material
        passphrase: Encrypts the private part with legacy 3DES when
            given; None or empty writes it in the clear
        checksum: Two bytes repeated as the checksum; random if None
        config: Supplies the magic identifier

    Returns:
        Key file contents
    """
    if not material.is_private:
        raise ValueError("Private key material is required")
    config = config or LoaderConfig.default()
    if checksum is None:
        checksum = get_random_bytes(2)
    if len(checksum) != 2:
        raise ValueError("Checksum must be 2 bytes")

    cipher_type = CipherType.THREE_DES if passphrase else CipherType.NONE

    private = BufferWriter()
    private.put_bytes(checksum + checksum)
    private.put_bignum(material.d)
    private.put_bignum(material.iqmp)
    private.put_bignum(material.q)
    private.put_bignum(material.p)
    private.pad_to(BLOCK_SIZE)
    body = private.getvalue()

    if cipher_type != CipherType.NONE:
        session_key = MD5SessionKeyDeriver().derive(passphrase)
        body = LegacyDES3Cipher(session_key).encrypt(body)

    comment = (material.comment or '').encode(config.comment_encoding)
    out = BufferWriter()
    out.put_bytes(config.magic)
    out.put_byte(cipher_type)
    out.put_uint32(0)
    out.put_uint32(material.bits or material.size_in_bits)
    out.put_bignum(material.n)
    out.put_bignum(material.e)
    out.put_string(comment)
    out.put_bytes(body)

    logger.debug(f"Serialized SSH1 private key, cipher={int(cipher_type)}")
    return out.getvalue()
