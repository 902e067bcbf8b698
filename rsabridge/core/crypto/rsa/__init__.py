"""RSA encryption/decryption module."""
from .models import KeyRole, RSAKeyRecord
from .rsa_key_decoder import RSAKeyDecoder
from .rsa_service import RSAService

__all__ = [
    'KeyRole',
    'RSAKeyRecord',
    'RSAKeyDecoder',
    'RSAService',
]
