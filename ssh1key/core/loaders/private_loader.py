"""
Loader for the SSH1 private key container.

Layout::

    magic "SSH PRIVATE KEY FILE FORMAT 1.1\\n\\0"
    cipher type      u8
    reserved         4 bytes
    bits             u32, not checked against the modulus
    n, e             bignums
    comment          u32 length + bytes
    -- encrypted, in whole 8-byte blocks, unless cipher type is 0 --
    checksum         4 bytes, b0 == b2 and b1 == b3
    d, iqmp          bignums
    q, p             bignums, stored in this order
    padding
"""
from typing import Optional, Union

from ..codec.reader import BufferReader
from ..config import LoaderConfig, CipherType
from ..crypto.des import LegacyDES3Cipher, BLOCK_SIZE
from ..crypto.key_derivation import SessionKeyDeriver, MD5SessionKeyDeriver, to_buffer, wipe
from ..crypto.rsa import RSAKeyMaterial, derive_crt_exponents
from ..exceptions import (
    TruncatedInputError,
    InvalidFormatError,
    BadMagicError,
    WrongPassphraseError,
    OperationCancelledError,
)
from ..logging import get_logger
from ..passphrase import PassphraseProvider

logger = get_logger(__name__)

CHECKSUM_SIZE = 4


class PrivateKeyLoader:
    """
    Parses SSH1 private key files.

    Holds only configuration; every load() call builds its own reader,
    cipher and session key, so one loader can serve several threads.

    Example:
        >>> loader = PrivateKeyLoader()
        >>> material = loader.load(data, StaticPassphrase("secret"))
    """

    def __init__(
        self,
        config: Optional[LoaderConfig] = None,
        key_deriver: Optional[SessionKeyDeriver] = None
    ):
        """Initializes the loader."""
        self.config = config or LoaderConfig.default()
        self.key_deriver = key_deriver or MD5SessionKeyDeriver()

    def load(
        self,
        data: Union[bytes, bytearray, memoryview],
        passphrase_provider: Optional[PassphraseProvider] = None
    ) -> RSAKeyMaterial:
        """
        Loads a private key.

        Args:
            data: Contents of the private key file
            passphrase_provider: Asked for the passphrase when the key
                is encrypted

        Returns:
            Complete private key material

        Raises:
            TruncatedInputError: If a field runs past the end of data
            BadMagicError: If the file identifier is wrong
            BufferTooSmallError: If the comment exceeds its capacity
            WrongPassphraseError: If the decrypted checksum is wrong
            InvalidFormatError: If the plaintext checksum is wrong
            OperationCancelledError: If no passphrase was given
        """
        reader = BufferReader(data)
        try:
            return self._parse(reader, passphrase_provider)
        finally:
            reader.wipe()

    def _parse(
        self,
        reader: BufferReader,
        passphrase_provider: Optional[PassphraseProvider]
    ) -> RSAKeyMaterial:
        magic = self.config.magic
        if reader.remaining < len(magic):
            raise TruncatedInputError(
                f"Input of {reader.remaining} bytes is shorter than the "
                f"private key header"
            )
        if reader.read_bytes(len(magic)) != magic:
            raise BadMagicError("Not an SSH1 private key file")

        cipher_type = reader.read_byte()
        reader.skip(4, 'reserved bytes')
        bits = reader.read_uint32()

        n = reader.read_bignum()
        e = reader.read_bignum()
        raw_comment = reader.read_string(self.config.comment_capacity)
        comment = self.config.decode_comment(raw_comment)
        logger.debug(
            f"SSH1 private key header: cipher={cipher_type}, bits={bits}, "
            f"modulus={n.bit_length()} bits, comment={comment!r}"
        )

        encrypted = cipher_type != CipherType.NONE
        if encrypted:
            self._decrypt(reader, comment, passphrase_provider)

        checksum = reader.peek(CHECKSUM_SIZE)
        if checksum[0] != checksum[2] or checksum[1] != checksum[3]:
            if encrypted:
                logger.warning(f"Bad passphrase for {comment}")
                raise WrongPassphraseError(
                    f"Bad passphrase for {comment}", comment=comment
                )
            raise InvalidFormatError("Private key checksum mismatch")
        reader.skip(CHECKSUM_SIZE)

        d = reader.read_bignum()
        iqmp = reader.read_bignum()
        # q comes first on disk
        q = reader.read_bignum()
        p = reader.read_bignum()

        if p < 2 or q < 2:
            raise InvalidFormatError("Prime factors must be at least 2")
        dmp1, dmq1 = derive_crt_exponents(d, p, q)

        logger.debug(f"Loaded SSH1 private key {comment!r}")
        return RSAKeyMaterial(
            n=n,
            e=e,
            d=d,
            p=p,
            q=q,
            iqmp=iqmp,
            dmp1=dmp1,
            dmq1=dmq1,
            bits=bits,
            comment=comment or None
        )

    def _decrypt(
        self,
        reader: BufferReader,
        comment: str,
        passphrase_provider: Optional[PassphraseProvider]
    ) -> None:
        if passphrase_provider is None:
            raise OperationCancelledError(
                f"Key {comment!r} is encrypted and no passphrase provider was given"
            )

        answer = passphrase_provider(self.config.format_prompt(comment))
        if answer is None:
            raise OperationCancelledError("Passphrase prompt cancelled")

        try:
            session_key = to_buffer(self.key_deriver.derive(answer))
        finally:
            if isinstance(answer, bytearray):
                wipe(answer)

        try:
            cipher = LegacyDES3Cipher(session_key)
            try:
                reader.decrypt_remaining(cipher.decrypt, BLOCK_SIZE)
            finally:
                cipher.wipe()
        finally:
            wipe(session_key)


def load_private(
    data: Union[bytes, bytearray, memoryview],
    passphrase_provider: Optional[PassphraseProvider] = None,
    config: Optional[LoaderConfig] = None
) -> RSAKeyMaterial:
    """Loads an SSH1 private key; see PrivateKeyLoader.load()."""
    return PrivateKeyLoader(config).load(data, passphrase_provider)
