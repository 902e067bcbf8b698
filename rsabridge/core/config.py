"""
Engine configuration module.

Fixes the signature scheme and output formatting used by RSAService.
"""
from dataclasses import dataclass
from cryptography.hazmat.primitives import hashes


# PKCS#1 v1.5 needs at least 11 bytes of padding per block
PKCS1_V15_OVERHEAD = 11

HASH_ALGORITHMS = {
    'SHA1': hashes.SHA1,
    'SHA256': hashes.SHA256,
    'SHA512': hashes.SHA512,
}


@dataclass(frozen=True)
class RSAConfig:
    """
    RSA engine configuration.
    
    Signatures and encryption both use PKCS#1 v1.5 padding; only the
    digest used for signing and the hex letter case are adjustable.
    """
    hash_algorithm: str = 'SHA256'
    padding_overhead: int = PKCS1_V15_OVERHEAD
    uppercase_hex: bool = False
    
    def __post_init__(self):
        if self.hash_algorithm.upper() not in HASH_ALGORITHMS:
            raise ValueError(
                f"Unsupported hash algorithm: {self.hash_algorithm} "
                f"(expected one of {', '.join(HASH_ALGORITHMS)})"
            )
    
    @classmethod
    def default(cls) -> 'RSAConfig':
        """Create default configuration (SHA-256 signatures)."""
        return cls()
    
    @classmethod
    def legacy(cls, **kwargs) -> 'RSAConfig':
        """Create configuration for peers that sign with SHA-1."""
        return cls(hash_algorithm='SHA1', **kwargs)
    
    def create_hash(self) -> hashes.HashAlgorithm:
        """Instantiate the configured digest."""
        return HASH_ALGORITHMS[self.hash_algorithm.upper()]()
