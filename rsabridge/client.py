"""
CryptoModule - async facade over the RSA operations engine.

Example:
    >>> crypto = CryptoModule()
    >>> ciphertext = await crypto.encrypt("hello world", public_pem)
    >>> await crypto.decrypt(ciphertext, private_pem)
    'hello world'
"""
import asyncio
from typing import Any, Callable, Optional

from .core.config import RSAConfig
from .core.crypto import OutputEncoding, RSAService
from .core.exceptions import RSABridgeError
from .core.logging import get_logger

logger = get_logger(__name__)

HEX = OutputEncoding.HEX
BASE64 = OutputEncoding.BASE64


class CryptoModule:
    """
    Host-facing module exposing the eight RSA operations as coroutines.
    
    Every call runs the synchronous engine in a worker thread. Calls share
    no state, so any number may run concurrently. Once started a call runs
    to completion; cancelling the awaiting task does not stop the thread.
    """
    
    name = "Crypto"
    
    METHODS = (
        'encrypt', 'encrypt64',
        'decrypt', 'decrypt64',
        'sign', 'sign64',
        'verify', 'verify64',
    )
    
    def __init__(self, config: Optional[RSAConfig] = None):
        self.config = config or RSAConfig.default()
        self._service = RSAService(config=self.config)
    
    @property
    def service(self) -> RSAService:
        return self._service
    
    async def _run(self, func: Callable, *args) -> Any:
        return await asyncio.to_thread(func, *args)
    
    async def encrypt(self, message: str, public_key: str) -> str:
        return await self._run(self._service.encrypt, message, public_key, HEX)
    
    async def encrypt64(self, message: str, public_key: str) -> str:
        return await self._run(self._service.encrypt, message, public_key, BASE64)
    
    async def decrypt(self, encoded_message: str, private_key: str) -> str:
        return await self._run(self._service.decrypt, encoded_message, private_key, HEX)
    
    async def decrypt64(self, encoded_message: str, private_key: str) -> str:
        return await self._run(self._service.decrypt, encoded_message, private_key, BASE64)
    
    async def sign(self, message: str, private_key: str) -> str:
        return await self._run(self._service.sign, message, private_key, HEX)
    
    async def sign64(self, message: str, private_key: str) -> str:
        return await self._run(self._service.sign, message, private_key, BASE64)
    
    async def verify(self, signature: str, message: str, public_key: str) -> bool:
        return await self._run(self._service.verify, signature, message, public_key, HEX)
    
    async def verify64(self, signature: str, message: str, public_key: str) -> bool:
        return await self._run(self._service.verify, signature, message, public_key, BASE64)
    
    async def invoke(
        self,
        method: str,
        *args: str,
        resolve: Callable[[Any], None],
        reject: Callable[[str, str], None]
    ) -> None:
        """
        Runs an operation by name and settles the host's completion callbacks.
        
        Args:
            method: One of METHODS
            *args: String arguments of the operation
            resolve: Called with the result on success
            reject: Called with (label, message) on a classified failure
            
        Raises:
            AttributeError: If the method name is not an operation
        """
        if method not in self.METHODS:
            raise AttributeError(f"{self.name} has no method '{method}'")
        
        try:
            result = await getattr(self, method)(*args)
        except RSABridgeError as e:
            logger.debug(f"{self.name}.{method} rejected: {e.label}")
            reject(e.label, e.message)
            return
        
        resolve(result)
