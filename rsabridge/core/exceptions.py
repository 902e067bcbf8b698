"""
Custom exceptions for RSA operations.

Every failure of a public operation is raised as exactly one of the
classes below. Each carries an opaque ``label`` naming the failure kind
and a human-readable message.
"""
from typing import Optional


class RSABridgeError(Exception):
    """Base exception for all rsabridge errors."""
    
    label: str = "Error"
    
    def __init__(self, message: str, label: Optional[str] = None) -> None:
        """
        Initialize the exception.
        
        Args:
            message: Error message
            label: Failure kind (defaults to the class label)
        """
        if label is not None:
            self.label = label
        self.message = message
        super().__init__(message)
    
    def __str__(self) -> str:
        return f"{self.label}: {self.message}"


class InvalidKeyFormatError(RSABridgeError):
    """Key text is not valid base64, not a key structure, or has the wrong role."""
    label = "InvalidKeyFormat"


class UnsupportedKeyTypeError(RSABridgeError):
    """Key structure decodes but is not an RSA key."""
    label = "UnsupportedKeyType"


class MessageTooLongError(RSABridgeError):
    """Plaintext exceeds the key's capacity."""
    
    label = "MessageTooLong"
    
    def __init__(self, message: str, length: int = 0, limit: int = 0) -> None:
        """
        Initialize the exception.
        
        Args:
            message: Error message
            length: Size of the rejected plaintext in bytes
            limit: Largest plaintext the key accepts in bytes
        """
        self.length = length
        self.limit = limit
        super().__init__(message)


class InvalidEncodingError(RSABridgeError):
    """Hex or base64 input could not be decoded."""
    label = "InvalidEncoding"


class DecryptionFailedError(RSABridgeError):
    """Ciphertext has the wrong length or fails the padding check."""
    label = "DecryptionFailed"


class InvalidUtf8Error(RSABridgeError):
    """Decrypted bytes are not valid UTF-8."""
    label = "InvalidUtf8"


__all__ = [
    'RSABridgeError',
    'InvalidKeyFormatError',
    'UnsupportedKeyTypeError',
    'MessageTooLongError',
    'InvalidEncodingError',
    'DecryptionFailedError',
    'InvalidUtf8Error',
]
