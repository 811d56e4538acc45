# CLI implementation using Typer for sign, verify, keygen and selftest.
from __future__ import annotations

from pathlib import Path
from typing import Optional

import click
import typer

from . import __version__
from .config import AppConfig, dump_default_config, load_config
from .core.exceptions import FileSigError
from .logging import configure_logging
from .services.session import SigningSession
from .services.signer_service import SignerService

app = typer.Typer(help="Sign files with RSA-PSS and verify detached signatures")


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"filesig {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(None, "--config", metavar="PATH"),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show version and exit"
    ),
) -> None:
    try:
        ctx.obj = load_config(config)
    except FileSigError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)
    configure_logging(ctx.obj.logging)


def _config() -> AppConfig:
    return click.get_current_context().obj


@app.command("sign")
def sign(
    input: Path = typer.Option(..., "-i", exists=True, readable=True, dir_okay=False, help="File to sign"),
    out_dir: Optional[Path] = typer.Option(None, "-o", help="Output directory (default: next to input)"),
    public_key: Optional[Path] = typer.Option(None, "--public-key", help="Public key path"),
    sig: Optional[Path] = typer.Option(None, "--sig", "-s", help="Signature path"),
):
    """Generate a fresh key pair, sign a file, write public key and signature"""
    cfg = _config()
    base = out_dir or input.parent
    pub_path = public_key or base / cfg.output.public_key_name
    sig_path = sig or base / cfg.output.signature_name
    try:
        SignerService(timeout=cfg.tasks.timeout_seconds).sign(input, pub_path, sig_path)
    except FileSigError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"Public key -> {pub_path}")
    typer.echo(f"Signature -> {sig_path}")


@app.command("verify")
def verify(
    input: Path = typer.Option(..., "-i", help="Signed file"),
    public_key: Path = typer.Option(..., "-k", "--public-key", help="Armored public key"),
    sig: Path = typer.Option(..., "-s", "--sig", help="Base64 signature"),
):
    """Verify a detached signature"""
    ok = SignerService(timeout=_config().tasks.timeout_seconds).verify(input, public_key, sig)
    typer.echo("Valid signature" if ok else "Invalid signature")
    raise typer.Exit(code=0 if ok else 2)


@app.command("keygen")
def keygen(
    output: Optional[Path] = typer.Option(None, "-o", help="Write the public key here instead of stdout"),
):
    """Generate a key pair and export its public half (the private half is discarded)"""
    armor = SigningSession().generate()
    if output is None:
        typer.echo(armor, nl=False)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(armor, encoding="utf-8")
    typer.echo(f"Public key -> {output}")


@app.command("selftest")
def selftest():
    """Sign and verify a sample payload in memory"""
    from .crypto.verifier import Verifier

    session = SigningSession()
    armor = session.generate()
    sig_b64 = session.sign(b"hello world")
    ok = Verifier.verify(armor, b"hello world", sig_b64) and not Verifier.verify(armor, b"hello world!", sig_b64)
    if not ok:
        typer.echo("Selftest FAILED", err=True)
        raise typer.Exit(code=1)
    typer.echo("Selftest OK")


@app.command("init-config")
def init_config(target: Path = typer.Argument(..., help="Where to write the default config")):
    """Write the default configuration as YAML"""
    dump_default_config(target)
    typer.echo(f"Config -> {target}")


if __name__ == "__main__":
    app()
