"""
Basic usage - encrypt, decrypt, sign and verify with PEM keys
"""
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

import rsabridge


def main():
    # Any PEM or bare base64 key works; generate a throwaway pair here
    private_key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
    private_pem = private_key.private_bytes(
        serialization.Encoding.PEM,
        serialization.PrivateFormat.PKCS8,
        serialization.NoEncryption()
    ).decode()
    public_pem = private_key.public_key().public_bytes(
        serialization.Encoding.PEM,
        serialization.PublicFormat.SubjectPublicKeyInfo
    ).decode()
    
    ciphertext = rsabridge.encrypt64("hello world", public_pem)
    print(f"Ciphertext: {ciphertext[:40]}...")
    print(f"Decrypted:  {rsabridge.decrypt64(ciphertext, private_pem)}")
    
    signature = rsabridge.sign("hello world", private_pem)
    print(f"Valid:      {rsabridge.verify(signature, 'hello world', public_pem)}")
    print(f"Tampered:   {rsabridge.verify(signature, 'hello WORLD', public_pem)}")
    
    try:
        rsabridge.encrypt("x" * 300, public_pem)
    except rsabridge.RSABridgeError as e:
        print(f"Rejected:   {e.label} ({e.message})")


if __name__ == "__main__":
    main()
