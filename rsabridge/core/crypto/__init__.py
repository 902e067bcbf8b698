"""Crypto module - RSA operations over plain strings."""
from .utils import TextEncoder, HexEncoder, Base64Encoder, OutputEncoding
from .rsa import KeyRole, RSAKeyRecord, RSAKeyDecoder, RSAService

_rsa_service = RSAService()


def encrypt(message: str, public_key: str) -> str:
    """Encrypts a message; returns hex ciphertext."""
    return _rsa_service.encrypt(message, public_key, OutputEncoding.HEX)


def encrypt64(message: str, public_key: str) -> str:
    """Encrypts a message; returns base64 ciphertext."""
    return _rsa_service.encrypt(message, public_key, OutputEncoding.BASE64)


def decrypt(encoded_message: str, private_key: str) -> str:
    """Decrypts hex ciphertext."""
    return _rsa_service.decrypt(encoded_message, private_key, OutputEncoding.HEX)


def decrypt64(encoded_message: str, private_key: str) -> str:
    """Decrypts base64 ciphertext."""
    return _rsa_service.decrypt(encoded_message, private_key, OutputEncoding.BASE64)


def sign(message: str, private_key: str) -> str:
    """Signs a message; returns hex signature."""
    return _rsa_service.sign(message, private_key, OutputEncoding.HEX)


def sign64(message: str, private_key: str) -> str:
    """Signs a message; returns base64 signature."""
    return _rsa_service.sign(message, private_key, OutputEncoding.BASE64)


def verify(signature: str, message: str, public_key: str) -> bool:
    """Verifies a hex signature."""
    return _rsa_service.verify(signature, message, public_key, OutputEncoding.HEX)


def verify64(signature: str, message: str, public_key: str) -> bool:
    """Verifies a base64 signature."""
    return _rsa_service.verify(signature, message, public_key, OutputEncoding.BASE64)


OPERATIONS = {
    'encrypt': encrypt,
    'encrypt64': encrypt64,
    'decrypt': decrypt,
    'decrypt64': decrypt64,
    'sign': sign,
    'sign64': sign64,
    'verify': verify,
    'verify64': verify64,
}

__all__ = [
    'TextEncoder',
    'HexEncoder',
    'Base64Encoder',
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
    'OPERATIONS',
]
