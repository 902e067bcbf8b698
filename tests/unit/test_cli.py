"""Tests for the rsabridge CLI."""
import pytest
from cryptography.hazmat.primitives import serialization
from typer.testing import CliRunner

from rsabridge.cli.main import app

runner = CliRunner()


@pytest.fixture
def key_files(tmp_path, public_pem, private_pem):
    """Writes the key pair to disk."""
    public_path = tmp_path / "public.pem"
    private_path = tmp_path / "private.pem"
    public_path.write_text(public_pem)
    private_path.write_text(private_pem)
    return public_path, private_path


class TestCLI:
    """Test suite for CLI commands."""
    
    def test_encrypt_decrypt(self, key_files):
        public_path, private_path = key_files
        
        encrypted = runner.invoke(app, ["encrypt", "hello world", "-k", str(public_path)])
        assert encrypted.exit_code == 0
        ciphertext = encrypted.stdout.strip()
        assert len(ciphertext) == 512
        
        decrypted = runner.invoke(app, ["decrypt", ciphertext, "-k", str(private_path)])
        assert decrypted.exit_code == 0
        assert decrypted.stdout.strip() == "hello world"
    
    def test_base64_roundtrip_from_stdin(self, key_files):
        public_path, private_path = key_files
        
        encrypted = runner.invoke(
            app, ["encrypt", "-b", "-k", str(public_path)], input="from stdin\n"
        )
        assert encrypted.exit_code == 0
        
        decrypted = runner.invoke(
            app, ["decrypt", "--base64", "-k", str(private_path)], input=encrypted.stdout
        )
        assert decrypted.stdout.strip() == "from stdin"
    
    def test_sign_verify(self, key_files):
        public_path, private_path = key_files
        
        signed = runner.invoke(app, ["sign", "hello world", "-k", str(private_path)])
        signature = signed.stdout.strip()
        
        ok = runner.invoke(app, ["verify", signature, "hello world", "-k", str(public_path)])
        assert ok.exit_code == 0
        assert "Signature OK" in ok.stdout
        
        bad = runner.invoke(app, ["verify", signature, "hello WORLD", "-k", str(public_path)])
        assert bad.exit_code == 2
    
    def test_sha1_option(self, key_files):
        public_path, private_path = key_files
        
        signed = runner.invoke(app, ["--sha1", "sign", "m", "-k", str(private_path)])
        signature = signed.stdout.strip()
        
        assert runner.invoke(app, ["--sha1", "verify", signature, "m", "-k", str(public_path)]).exit_code == 0
        assert runner.invoke(app, ["verify", signature, "m", "-k", str(public_path)]).exit_code == 2
    
    def test_classified_failure(self, key_files):
        public_path, _ = key_files
        
        result = runner.invoke(app, ["decrypt", "00", "-k", str(public_path)])
        
        assert result.exit_code == 1
        assert "InvalidKeyFormat" in result.output
    
    def test_missing_key_file(self, tmp_path):
        result = runner.invoke(app, ["encrypt", "x", "-k", str(tmp_path / "missing.pem")])
        assert result.exit_code != 0
    
    def test_der_key_files(self, tmp_path, rsa_private_key):
        """Test binary DER keys work like their PEM form."""
        public_path = tmp_path / "public.der"
        private_path = tmp_path / "private.der"
        public_path.write_bytes(rsa_private_key.public_key().public_bytes(
            encoding=serialization.Encoding.DER,
            format=serialization.PublicFormat.SubjectPublicKeyInfo
        ))
        private_path.write_bytes(rsa_private_key.private_bytes(
            encoding=serialization.Encoding.DER,
            format=serialization.PrivateFormat.PKCS8,
            encryption_algorithm=serialization.NoEncryption()
        ))
        
        encrypted = runner.invoke(app, ["encrypt", "hi", "-k", str(public_path)])
        assert encrypted.exit_code == 0
        
        decrypted = runner.invoke(
            app, ["decrypt", encrypted.stdout.strip(), "-k", str(private_path)]
        )
        assert decrypted.exit_code == 0
        assert decrypted.stdout.strip() == "hi"
    
    def test_binary_non_key_file(self, tmp_path):
        """Test an arbitrary binary file is a classified key failure."""
        path = tmp_path / "noise.bin"
        path.write_bytes(b"\x82\xff\x00\x01binary")
        
        result = runner.invoke(app, ["encrypt", "hi", "-k", str(path)])
        
        assert result.exit_code == 1
        assert result.exception is None or isinstance(result.exception, SystemExit)
        assert "InvalidKeyFormat" in result.output
