"""
rsabridge - RSA encrypt/decrypt/sign/verify over plain strings.

Usage:
    >>> from rsabridge import encrypt, decrypt
    >>> 
    >>> ciphertext = encrypt("hello world", public_pem)
    >>> decrypt(ciphertext, private_pem)
    'hello world'
"""
import logging
from .client import CryptoModule
from .core.logging import set_package_level

from .core.config import RSAConfig
from .core.crypto import (
    OutputEncoding,
    KeyRole,
    RSAKeyRecord,
    RSAKeyDecoder,
    RSAService,
    encrypt,
    encrypt64,
    decrypt,
    decrypt64,
    sign,
    sign64,
    verify,
    verify64,
)
from .core.exceptions import (
    RSABridgeError,
    InvalidKeyFormatError,
    UnsupportedKeyTypeError,
    MessageTooLongError,
    InvalidEncodingError,
    DecryptionFailedError,
    InvalidUtf8Error,
)

__version__ = '1.0.0'


def setup_logging(level=logging.INFO):
    """
    Configure logging for rsabridge modules.
    
    Args:
        level: Logging level (default: logging.INFO)
    """
    set_package_level(level)


__all__ = [
    'CryptoModule',
    'RSAConfig',
    'OutputEncoding',
    'KeyRole',
    'RSAKeyRecord',
    'RSAKeyDecoder',
    'RSAService',
    'encrypt',
    'encrypt64',
    'decrypt',
    'decrypt64',
    'sign',
    'sign64',
    'verify',
    'verify64',
    'RSABridgeError',
    'InvalidKeyFormatError',
    'UnsupportedKeyTypeError',
    'MessageTooLongError',
    'InvalidEncodingError',
    'DecryptionFailedError',
    'InvalidUtf8Error',
    'setup_logging',
]
