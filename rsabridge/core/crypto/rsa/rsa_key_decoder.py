"""RSA key decoder from PEM or bare base64 DER text."""
import re
from typing import Callable, Optional, Tuple

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives.asymmetric import rsa
from cryptography.hazmat.primitives.serialization import (
    load_der_private_key,
    load_der_public_key,
)

from ...exceptions import (
    InvalidEncodingError,
    InvalidKeyFormatError,
    UnsupportedKeyTypeError,
)
from ...logging import get_logger
from ..utils.encoding import Base64Encoder
from .models import KeyRole, RSAKeyRecord

logger = get_logger(__name__)

_PEM_BLOCK = re.compile(
    r'-----BEGIN ([A-Z0-9 ]+)-----(.*?)-----END \1-----',
    re.DOTALL,
)


def _load_private(der: bytes):
    return load_der_private_key(der, password=None)


_LOADERS: dict = {
    KeyRole.PUBLIC: load_der_public_key,
    KeyRole.PRIVATE: _load_private,
}


class RSAKeyDecoder:
    """
    Decodes RSA keys from text.
    
    Accepted inputs are PEM blocks (``PUBLIC KEY``, ``RSA PUBLIC KEY``,
    ``PRIVATE KEY``, ``RSA PRIVATE KEY``) or the bare base64 body of the
    same DER structures. The caller states which role it needs; a key of
    the other role is rejected instead of being converted.
    """
    
    def __init__(self, encoder: Optional[Base64Encoder] = None):
        self.encoder = encoder or Base64Encoder()
    
    @staticmethod
    def unarmor(text: str) -> Tuple[Optional[str], str]:
        """
        Strips PEM armor.
        
        Returns:
            (label, base64 body); label is None for bare base64 input
        """
        if '-----BEGIN' not in text:
            return None, text
        
        match = _PEM_BLOCK.search(text)
        if match is None:
            raise InvalidKeyFormatError("Malformed PEM armor")
        
        label, body = match.group(1), match.group(2)
        if ':' in body:
            # RFC 1421 headers only appear on encrypted PEM
            raise InvalidKeyFormatError(
                f"Encrypted PEM keys are not supported ({label})"
            )
        return label, body
    
    def to_der(self, text: str) -> bytes:
        """Converts key text into DER bytes."""
        if not isinstance(text, str):
            raise InvalidKeyFormatError(
                f"Key must be a string, got {type(text).__name__}"
            )
        if not text.strip():
            raise InvalidKeyFormatError("Key is empty")
        
        label, body = self.unarmor(text)
        try:
            der = self.encoder.decode(body)
        except InvalidEncodingError as exc:
            raise InvalidKeyFormatError(
                f"Key is not valid base64: {exc.message}"
            ) from exc
        
        if not der:
            raise InvalidKeyFormatError("Key body is empty")
        logger.debug(f"Key text decoded: label={label}, der_length={len(der)}")
        return der
    
    @staticmethod
    def _loads_as(der: bytes, role: KeyRole) -> bool:
        """Checks whether DER parses as a key of the given role."""
        try:
            _LOADERS[role](der)
        except (ValueError, TypeError, UnsupportedAlgorithm):
            return False
        return True
    
    def _load(self, der: bytes, role: KeyRole):
        loader: Callable = _LOADERS[role]
        try:
            return loader(der)
        except UnsupportedAlgorithm as exc:
            raise UnsupportedKeyTypeError(
                f"Key algorithm is not supported: {exc}"
            ) from exc
        except (ValueError, TypeError) as exc:
            other = KeyRole.PRIVATE if role is KeyRole.PUBLIC else KeyRole.PUBLIC
            if self._loads_as(der, other):
                raise InvalidKeyFormatError(
                    f"Expected a {role.value} key but got a {other.value} key"
                ) from exc
            raise InvalidKeyFormatError(
                f"Key does not decode to a {role.value} key structure"
            ) from exc
    
    def decode(self, text: str, role: KeyRole) -> RSAKeyRecord:
        """Decodes key text into a record of the requested role."""
        key = self._load(self.to_der(text), role)
        
        if role is KeyRole.PUBLIC:
            if not isinstance(key, rsa.RSAPublicKey):
                raise UnsupportedKeyTypeError(
                    f"Expected an RSA public key, got {type(key).__name__.lstrip('_')}"
                )
            numbers = key.public_numbers()
            record = RSAKeyRecord(role=role, n=numbers.n, e=numbers.e)
        else:
            if not isinstance(key, rsa.RSAPrivateKey):
                raise UnsupportedKeyTypeError(
                    f"Expected an RSA private key, got {type(key).__name__.lstrip('_')}"
                )
            numbers = key.private_numbers()
            record = RSAKeyRecord(
                role=role,
                n=numbers.public_numbers.n,
                e=numbers.public_numbers.e,
                d=numbers.d,
                p=numbers.p,
                q=numbers.q,
            )
        
        logger.debug(f"Decoded {record!r}")
        return record
    
    def decode_public(self, text: str) -> RSAKeyRecord:
        """Decodes a public key (SubjectPublicKeyInfo or PKCS#1)."""
        return self.decode(text, KeyRole.PUBLIC)
    
    def decode_private(self, text: str) -> RSAKeyRecord:
        """Decodes a private key (PKCS#8 or PKCS#1)."""
        return self.decode(text, KeyRole.PRIVATE)
