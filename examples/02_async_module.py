"""
Async usage - the Crypto module with resolve/reject callbacks
"""
import asyncio

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from rsabridge import CryptoModule


async def main():
    private_key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
    public_pem = private_key.public_key().public_bytes(
        serialization.Encoding.PEM,
        serialization.PublicFormat.SubjectPublicKeyInfo
    ).decode()
    
    crypto = CryptoModule()
    
    # Awaitable methods
    ciphertext = await crypto.encrypt("hello world", public_pem)
    print(f"{crypto.name}.encrypt -> {ciphertext[:40]}...")
    
    # Callback style, as a host runtime would settle a promise.
    # Decrypting with the public key rejects with InvalidKeyFormat.
    await crypto.invoke(
        "decrypt", ciphertext, public_pem,
        resolve=lambda value: print(f"resolved: {value}"),
        reject=lambda label, message: print(f"rejected: {label}: {message}"),
    )


if __name__ == "__main__":
    asyncio.run(main())
