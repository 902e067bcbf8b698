"""RSA encryption/decryption and signing service."""
from typing import Optional, Union

from Crypto.Cipher import PKCS1_v1_5
from Crypto.Random import get_random_bytes
from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric import padding as rsa_padding

from ...config import RSAConfig
from ...exceptions import (
    DecryptionFailedError,
    InvalidEncodingError,
    InvalidKeyFormatError,
    InvalidUtf8Error,
    MessageTooLongError,
)
from ...logging import get_logger
from ..utils.encoding import OutputEncoding
from .models import KeyRole, RSAKeyRecord
from .rsa_key_decoder import RSAKeyDecoder

logger = get_logger(__name__)

KeyInput = Union[str, RSAKeyRecord]


class RSAService:
    """
    RSA encryption/decryption and verification service.
    
    Encryption uses PKCS#1 v1.5 padding (randomised); signatures use
    PKCS#1 v1.5 with the digest from RSAConfig (SHA-256 by default).
    Each transform is implemented once and takes the textual encoding of
    its binary side as a parameter. Nothing is retained between calls.
    """
    
    def __init__(
        self,
        config: Optional[RSAConfig] = None,
        key_decoder: Optional[RSAKeyDecoder] = None
    ):
        """Initializes RSA service."""
        self.config = config or RSAConfig.default()
        self.key_decoder = key_decoder or RSAKeyDecoder()
    
    def _encoder(self, encoding: OutputEncoding):
        return encoding.encoder(uppercase_hex=self.config.uppercase_hex)
    
    def load_key(self, key: KeyInput, role: KeyRole) -> RSAKeyRecord:
        """Parses key text, or checks the role of an already parsed record."""
        if isinstance(key, RSAKeyRecord):
            if key.role is not role:
                raise InvalidKeyFormatError(
                    f"Expected a {role.value} key but got a {key.role.value} key"
                )
            return key
        return self.key_decoder.decode(key, role)
    
    @staticmethod
    def _to_utf8(message: str) -> bytes:
        if not isinstance(message, str):
            raise InvalidEncodingError(
                f"Message must be a string, got {type(message).__name__}"
            )
        try:
            return message.encode('utf-8')
        except UnicodeEncodeError as exc:
            raise InvalidUtf8Error(
                f"Message cannot be encoded as UTF-8: {exc.reason}"
            ) from exc
    
    def encrypt(
        self,
        message: str,
        public_key: KeyInput,
        encoding: OutputEncoding = OutputEncoding.HEX
    ) -> str:
        """
        Encrypts a message with an RSA public key.
        
        Args:
            message: Plaintext; its UTF-8 form must fit in one block
            public_key: Public key text or record
            encoding: Textual encoding of the returned ciphertext
            
        Returns:
            Ciphertext, exactly one modulus long before encoding
        """
        key = self.load_key(public_key, KeyRole.PUBLIC)
        data = self._to_utf8(message)
        
        limit = key.max_message_length(self.config.padding_overhead)
        if len(data) > limit:
            raise MessageTooLongError(
                f"Message is {len(data)} bytes; a {key.size_in_bits}-bit key "
                f"accepts at most {limit}",
                length=len(data),
                limit=limit,
            )
        
        logger.debug(
            f"encrypt: key_bits={key.size_in_bits}, length={len(data)}, "
            f"encoding={encoding.value}"
        )
        cipher = PKCS1_v1_5.new(key.to_cryptodome())
        try:
            ciphertext = cipher.encrypt(data)
        except ValueError as exc:
            raise MessageTooLongError(str(exc), length=len(data), limit=limit) from exc
        
        return self._encoder(encoding).encode(ciphertext)
    
    def decrypt(
        self,
        ciphertext: str,
        private_key: KeyInput,
        encoding: OutputEncoding = OutputEncoding.HEX
    ) -> str:
        """
        Decrypts a ciphertext with an RSA private key.
        
        Padding failures are reported without detail so a caller cannot
        tell which check rejected the block.
        """
        key = self.load_key(private_key, KeyRole.PRIVATE)
        data = self._encoder(encoding).decode(ciphertext)
        
        if len(data) != key.size_in_bytes:
            raise DecryptionFailedError(
                f"Ciphertext is {len(data)} bytes; expected {key.size_in_bytes} "
                f"for a {key.size_in_bits}-bit key"
            )
        
        logger.debug(
            f"decrypt: key_bits={key.size_in_bits}, encoding={encoding.value}"
        )
        cipher = PKCS1_v1_5.new(key.to_cryptodome())
        sentinel = get_random_bytes(32)
        try:
            plaintext = cipher.decrypt(data, sentinel)
        except ValueError as exc:
            raise DecryptionFailedError(f"Decryption failed: {exc}") from exc
        if plaintext == sentinel:
            raise DecryptionFailedError("Decryption failed: padding check failed")
        
        try:
            return plaintext.decode('utf-8')
        except UnicodeDecodeError as exc:
            raise InvalidUtf8Error(
                f"Decrypted data is not valid UTF-8 (byte {exc.start})"
            ) from exc
    
    def sign(
        self,
        message: str,
        private_key: KeyInput,
        encoding: OutputEncoding = OutputEncoding.HEX
    ) -> str:
        """Signs a message with an RSA private key."""
        key = self.load_key(private_key, KeyRole.PRIVATE)
        data = self._to_utf8(message)
        
        logger.debug(
            f"sign: key_bits={key.size_in_bits}, hash={self.config.hash_algorithm}, "
            f"encoding={encoding.value}"
        )
        try:
            signature = key.to_cryptography().sign(
                data,
                rsa_padding.PKCS1v15(),
                self.config.create_hash()
            )
        except ValueError as exc:
            # Digest plus DigestInfo header does not fit the modulus
            raise MessageTooLongError(
                f"{key.size_in_bits}-bit key is too small for "
                f"{self.config.hash_algorithm} signatures: {exc}"
            ) from exc
        
        return self._encoder(encoding).encode(signature)
    
    def verify(
        self,
        signature: str,
        message: str,
        public_key: KeyInput,
        encoding: OutputEncoding = OutputEncoding.HEX
    ) -> bool:
        """
        Verifies a signature with an RSA public key.
        
        Returns False for any well-formed signature that does not match,
        including one of the wrong length. Raises only for malformed
        input: InvalidKeyFormat or UnsupportedKeyType for the key,
        InvalidEncoding for signature text or a non-string message, and
        InvalidUtf8 for a message that has no UTF-8 form (lone surrogates),
        the same as sign() does for that message.
        """
        key = self.load_key(public_key, KeyRole.PUBLIC)
        data = self._encoder(encoding).decode(signature)
        message_bytes = self._to_utf8(message)
        
        logger.debug(
            f"verify: key_bits={key.size_in_bits}, hash={self.config.hash_algorithm}, "
            f"encoding={encoding.value}"
        )
        try:
            key.to_cryptography().verify(
                data,
                message_bytes,
                rsa_padding.PKCS1v15(),
                self.config.create_hash()
            )
        except (InvalidSignature, ValueError):
            logger.debug("verify: signature does not match")
            return False
        return True
