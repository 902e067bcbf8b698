"""rsabridge CLI - RSA operations from the shell."""
import logging
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from rsabridge.core.config import RSAConfig
from rsabridge.core.crypto import Base64Encoder, OutputEncoding, RSAService
from rsabridge.core.exceptions import RSABridgeError
from rsabridge.core.logging import set_package_level

app = typer.Typer(
    name="rsabridge",
    help="RSA encrypt/decrypt/sign/verify with PEM keys",
    add_completion=False
)
console = Console()
err_console = Console(stderr=True)

KeyOption = typer.Option(
    ..., "--key", "-k",
    exists=True, dir_okay=False, readable=True,
    help="Path to a PEM or base64 key file"
)
Base64Option = typer.Option(
    False, "--base64", "-b",
    help="Use base64 instead of hex for ciphertexts and signatures"
)


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    legacy: bool = typer.Option(False, "--sha1", help="Sign and verify with SHA-1"),
):
    """RSA operations over PKCS#1 v1.5."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
        set_package_level(logging.DEBUG)
    ctx.obj = RSAConfig.legacy() if legacy else RSAConfig.default()


def _service(ctx: typer.Context) -> RSAService:
    return RSAService(config=ctx.obj or RSAConfig.default())


def _read_key(path: Path) -> str:
    """Reads key text; binary DER files are passed on as bare base64."""
    raw = path.read_bytes()
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError:
        return Base64Encoder().encode(raw)


def _encoding(use_base64: bool) -> OutputEncoding:
    return OutputEncoding.BASE64 if use_base64 else OutputEncoding.HEX


def _read_input(value: Optional[str], strip: bool = False) -> str:
    """Returns the argument, or stdin when it is omitted."""
    if value is None:
        value = sys.stdin.read()
        # echo/heredoc append a newline
        if value.endswith("\n"):
            value = value[:-1]
    return value.strip() if strip else value


def _fail(error: RSABridgeError):
    err_console.print(f"[red]{escape(error.label)}[/red]: {escape(error.message)}")
    raise typer.Exit(1)


def _emit(text: str):
    console.print(text, soft_wrap=True, highlight=False, markup=False, emoji=False)


@app.command()
def encrypt(
    ctx: typer.Context,
    message: Optional[str] = typer.Argument(None, help="Plaintext (stdin if omitted)"),
    key: Path = KeyOption,
    use_base64: bool = Base64Option,
):
    """Encrypt a message with a public key."""
    try:
        result = _service(ctx).encrypt(_read_input(message), _read_key(key), _encoding(use_base64))
    except RSABridgeError as e:
        _fail(e)
    _emit(result)


@app.command()
def decrypt(
    ctx: typer.Context,
    ciphertext: Optional[str] = typer.Argument(None, help="Ciphertext (stdin if omitted)"),
    key: Path = KeyOption,
    use_base64: bool = Base64Option,
):
    """Decrypt a ciphertext with a private key."""
    try:
        result = _service(ctx).decrypt(
            _read_input(ciphertext, strip=True), _read_key(key), _encoding(use_base64)
        )
    except RSABridgeError as e:
        _fail(e)
    _emit(result)


@app.command()
def sign(
    ctx: typer.Context,
    message: Optional[str] = typer.Argument(None, help="Message (stdin if omitted)"),
    key: Path = KeyOption,
    use_base64: bool = Base64Option,
):
    """Sign a message with a private key."""
    try:
        result = _service(ctx).sign(_read_input(message), _read_key(key), _encoding(use_base64))
    except RSABridgeError as e:
        _fail(e)
    _emit(result)


@app.command()
def verify(
    ctx: typer.Context,
    signature: str = typer.Argument(..., help="Signature to check"),
    message: Optional[str] = typer.Argument(None, help="Message (stdin if omitted)"),
    key: Path = KeyOption,
    use_base64: bool = Base64Option,
):
    """Verify a signature with a public key (exit 2 on mismatch)."""
    try:
        verified = _service(ctx).verify(
            signature.strip(), _read_input(message), _read_key(key), _encoding(use_base64)
        )
    except RSABridgeError as e:
        _fail(e)
    
    if verified:
        console.print("[green]Signature OK[/green]")
    else:
        console.print("[yellow]Signature does not match[/yellow]")
        raise typer.Exit(2)


if __name__ == "__main__":
    app()
