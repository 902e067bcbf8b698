"""RSA key record held for the duration of one operation."""
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from Crypto.PublicKey import RSA
from cryptography.hazmat.primitives.asymmetric import rsa

from ...config import PKCS1_V15_OVERHEAD


class KeyRole(Enum):
    """Role a parsed key plays within a single call."""
    PUBLIC = 'public'
    PRIVATE = 'private'


@dataclass(frozen=True)
class RSAKeyRecord:
    """
    Structured RSA key.
    
    Public keys carry the modulus and public exponent. Private keys also
    carry the private exponent and, when the source structure had them,
    the prime factors used for CRT decryption. The public exponent is kept
    on private records because the padding and signature primitives need it.
    """
    role: KeyRole
    n: int
    e: int
    d: Optional[int] = None
    p: Optional[int] = None
    q: Optional[int] = None
    
    def __post_init__(self):
        if self.role is KeyRole.PRIVATE and self.d is None:
            raise ValueError("Private key record requires a private exponent")
        if self.role is KeyRole.PUBLIC and self.d is not None:
            raise ValueError("Public key record must not carry a private exponent")
    
    @property
    def is_private(self) -> bool:
        return self.role is KeyRole.PRIVATE
    
    @property
    def size_in_bits(self) -> int:
        return self.n.bit_length()
    
    @property
    def size_in_bytes(self) -> int:
        """Modulus length in bytes (also the ciphertext/signature length)."""
        return (self.n.bit_length() + 7) // 8
    
    def max_message_length(self, overhead: int = PKCS1_V15_OVERHEAD) -> int:
        """Largest plaintext, in bytes, a single block can carry."""
        return max(self.size_in_bytes - overhead, 0)
    
    def has_crt(self) -> bool:
        return self.p is not None and self.q is not None
    
    def to_cryptodome(self) -> RSA.RsaKey:
        """Builds a PyCryptodome key object from the record."""
        if not self.is_private:
            return RSA.construct((self.n, self.e))
        if self.has_crt():
            return RSA.construct((self.n, self.e, self.d, self.p, self.q))
        # PyCryptodome recovers the factors from (n, e, d)
        return RSA.construct((self.n, self.e, self.d))
    
    def to_cryptography(self) -> Union[rsa.RSAPublicKey, rsa.RSAPrivateKey]:
        """Builds a ``cryptography`` key object from the record."""
        public_numbers = rsa.RSAPublicNumbers(e=self.e, n=self.n)
        if not self.is_private:
            return public_numbers.public_key()
        
        p, q = self.p, self.q
        if not self.has_crt():
            p, q = rsa.rsa_recover_prime_factors(self.n, self.e, self.d)
        
        return rsa.RSAPrivateNumbers(
            p=p,
            q=q,
            d=self.d,
            dmp1=rsa.rsa_crt_dmp1(self.d, p),
            dmq1=rsa.rsa_crt_dmq1(self.d, q),
            iqmp=rsa.rsa_crt_iqmp(p, q),
            public_numbers=public_numbers,
        ).private_key()
    
    def __repr__(self) -> str:
        return f"RSAKeyRecord(role={self.role.value}, bits={self.size_in_bits})"
