"""Pytest fixtures for rsabridge tests."""
import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec, rsa


def _body(pem: str) -> str:
    """Strips PEM armor, leaving the bare base64 body on one line."""
    lines = [line for line in pem.strip().splitlines() if not line.startswith('-----')]
    return ''.join(lines)


@pytest.fixture(scope="session")
def rsa_private_key():
    """Generates a 2048-bit RSA private key once per session."""
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def other_private_key():
    """A second, unrelated 2048-bit key pair."""
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def public_pem(rsa_private_key):
    """SubjectPublicKeyInfo PEM (BEGIN PUBLIC KEY)."""
    return rsa_private_key.public_key().public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.SubjectPublicKeyInfo
    ).decode()


@pytest.fixture(scope="session")
def public_pkcs1_pem(rsa_private_key):
    """PKCS#1 PEM (BEGIN RSA PUBLIC KEY)."""
    return rsa_private_key.public_key().public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.PKCS1
    ).decode()


@pytest.fixture(scope="session")
def private_pem(rsa_private_key):
    """PKCS#8 PEM (BEGIN PRIVATE KEY)."""
    return rsa_private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption()
    ).decode()


@pytest.fixture(scope="session")
def private_pkcs1_pem(rsa_private_key):
    """PKCS#1 PEM (BEGIN RSA PRIVATE KEY)."""
    return rsa_private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.TraditionalOpenSSL,
        encryption_algorithm=serialization.NoEncryption()
    ).decode()


@pytest.fixture(scope="session")
def encrypted_private_pem(rsa_private_key):
    """Password-protected PKCS#8 PEM."""
    return rsa_private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.BestAvailableEncryption(b"secret")
    ).decode()


@pytest.fixture(scope="session")
def public_b64(public_pem):
    """Bare base64 SubjectPublicKeyInfo."""
    return _body(public_pem)


@pytest.fixture(scope="session")
def private_b64(private_pem):
    """Bare base64 PKCS#8 private key."""
    return _body(private_pem)


@pytest.fixture(scope="session")
def other_public_pem(other_private_key):
    return other_private_key.public_key().public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.SubjectPublicKeyInfo
    ).decode()


@pytest.fixture(scope="session")
def other_private_pem(other_private_key):
    return other_private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption()
    ).decode()


@pytest.fixture(scope="session")
def ec_private_key():
    """An EC key for the unsupported key type paths."""
    return ec.generate_private_key(ec.SECP256R1())


@pytest.fixture(scope="session")
def ec_public_pem(ec_private_key):
    return ec_private_key.public_key().public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.SubjectPublicKeyInfo
    ).decode()


@pytest.fixture(scope="session")
def ec_private_pem(ec_private_key):
    return ec_private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption()
    ).decode()
