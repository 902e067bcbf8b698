"""Textual encodings for ciphertexts and signatures."""
import base64
import binascii
import re
from abc import ABC, abstractmethod
from enum import Enum

from ...exceptions import InvalidEncodingError

_WHITESPACE = re.compile(r'\s+')


class TextEncoder(ABC):
    """Abstract base class for binary-to-text encoders."""
    
    @abstractmethod
    def encode(self, data: bytes) -> str:
        """Encodes bytes to text."""
        pass
    
    @abstractmethod
    def decode(self, data: str) -> bytes:
        """Decodes text to bytes, raising InvalidEncodingError on bad input."""
        pass


class HexEncoder(TextEncoder):
    """Hexadecimal encoder/decoder."""
    
    def __init__(self, uppercase: bool = False):
        self.uppercase = uppercase
    
    def encode(self, data: bytes) -> str:
        """Encodes bytes to hex (lowercase unless configured otherwise)."""
        encoded = data.hex()
        return encoded.upper() if self.uppercase else encoded
    
    def decode(self, data: str) -> bytes:
        """Decodes hex in either letter case; whitespace is ignored."""
        try:
            return bytes.fromhex(_WHITESPACE.sub('', data))
        except (TypeError, ValueError) as exc:
            raise InvalidEncodingError(f"Invalid hex input: {exc}") from exc


class Base64Encoder(TextEncoder):
    """Standard Base64 encoder with a lenient-alphabet, strict-content decoder."""
    
    def encode(self, data: bytes) -> str:
        """Encodes bytes to padded standard Base64."""
        return base64.b64encode(data).decode('ascii')
    
    def decode(self, data: str) -> bytes:
        """Decodes Base64 (standard or URL-safe, with or without padding)."""
        try:
            data = _WHITESPACE.sub('', data)
            data = data.replace('-', '+').replace('_', '/')
            padding = len(data) % 4
            if padding:
                data += '=' * (4 - padding)
            return base64.b64decode(data, validate=True)
        except (TypeError, ValueError, binascii.Error) as exc:
            raise InvalidEncodingError(f"Invalid base64 input: {exc}") from exc


class OutputEncoding(Enum):
    """Textual encoding selected by an operation variant."""
    
    HEX = 'hex'
    BASE64 = 'base64'
    
    def encoder(self, uppercase_hex: bool = False) -> TextEncoder:
        """Returns the encoder for this variant."""
        if self is OutputEncoding.BASE64:
            return Base64Encoder()
        return HexEncoder(uppercase=uppercase_hex)
