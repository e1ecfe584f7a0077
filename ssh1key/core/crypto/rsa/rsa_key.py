"""RSA key material produced by the SSH1 loaders."""
from dataclasses import dataclass, replace
from typing import Optional

from Crypto.PublicKey import RSA
from cryptography.hazmat.primitives.asymmetric import rsa

PRIVATE_FIELDS = ('d', 'p', 'q', 'iqmp', 'dmp1', 'dmq1')


@dataclass(frozen=True)
class RSAKeyMaterial:
    """
    RSA key components.

    Public keys carry n and e only. Private keys carry all eight
    components; dmp1 and dmq1 are always computed from d, p and q.

    Attributes:
        n: Modulus
        e: Public exponent
        d: Private exponent
        p: First prime factor
        q: Second prime factor
        iqmp: q^-1 mod p
        dmp1: d mod (p - 1)
        dmq1: d mod (q - 1)
        bits: Bit count declared by the key file (informational)
        comment: Key comment, if any
    """
    n: int
    e: int
    d: Optional[int] = None
    p: Optional[int] = None
    q: Optional[int] = None
    iqmp: Optional[int] = None
    dmp1: Optional[int] = None
    dmq1: Optional[int] = None
    bits: Optional[int] = None
    comment: Optional[str] = None

    def __post_init__(self):
        present = [getattr(self, name) is not None for name in PRIVATE_FIELDS]
        if any(present) and not all(present):
            raise ValueError("Private key material must be complete")

    @property
    def is_private(self) -> bool:
        """True if the private components are present."""
        return self.d is not None

    @property
    def size_in_bits(self) -> int:
        """Bit length of the modulus."""
        return self.n.bit_length()

    def public_key(self) -> 'RSAKeyMaterial':
        """Returns a copy without the private components."""
        return replace(
            self, d=None, p=None, q=None, iqmp=None, dmp1=None, dmq1=None
        )

    def to_pycryptodome(self) -> RSA.RsaKey:
        """Builds a PyCryptodome RsaKey; validates the components."""
        if not self.is_private:
            return RSA.construct((self.n, self.e))
        return RSA.construct((self.n, self.e, self.d, self.p, self.q))

    def to_cryptography(self):
        """Builds a cryptography key object; validates the components."""
        public_numbers = rsa.RSAPublicNumbers(e=self.e, n=self.n)
        if not self.is_private:
            return public_numbers.public_key()
        private_numbers = rsa.RSAPrivateNumbers(
            p=self.p,
            q=self.q,
            d=self.d,
            dmp1=self.dmp1,
            dmq1=self.dmq1,
            iqmp=self.iqmp,
            public_numbers=public_numbers
        )
        return private_numbers.private_key()

    def __repr__(self) -> str:
        kind = 'private' if self.is_private else 'public'
        return (
            f"RSAKeyMaterial({kind}, {self.size_in_bits} bits, "
            f"comment={self.comment!r})"
        )
