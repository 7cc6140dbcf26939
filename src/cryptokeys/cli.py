# Typer CLI: generate key descriptors, derive public keys, check key pairs.
from __future__ import annotations

import json
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional

import click
import typer

from .config import load_config
from .crypto.matcher import match_asymmetric
from .exceptions import CryptoKeyError
from .factory import KeyFactory, create_default_factory
from .keys import CryptographyKey
from .logging import configure_logging
from .version import __version__

app = typer.Typer(help="cryptokeys CLI")


class KeyKind(str, Enum):
    symmetric = "symmetric"
    private = "private"


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"cryptokeys {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(None, "--config", metavar="PATH", help="YAML config file"),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Print version and exit"
    ),
) -> None:
    app_config = load_config(config)
    configure_logging(app_config.logging.normalized_level())
    ctx.obj = create_default_factory(app_config)


def _factory() -> KeyFactory:
    return click.get_current_context().obj


def _read_descriptor(path: Path) -> Dict[str, Any]:
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except ValueError as exc:
        typer.echo(f"{path}: not a JSON key descriptor ({exc})", err=True)
        raise typer.Exit(code=1)
    if not isinstance(payload, dict):
        typer.echo(f"{path}: key descriptor must be a JSON object", err=True)
        raise typer.Exit(code=1)
    return payload


def _emit(key: CryptographyKey, output: Optional[Path]) -> None:
    text = key.to_json(indent=2)
    if output is None:
        typer.echo(text)
    else:
        output.write_text(text + "\n", encoding="utf-8")
        typer.echo(f"Written -> {output}", err=True)


def _fail(exc: CryptoKeyError) -> None:
    typer.echo(f"{type(exc).__name__}: {exc}", err=True)
    raise typer.Exit(code=1)


@app.command("generate")
def generate(
    algorithm: str = typer.Argument("RSA", help="Algorithm name, e.g. RSA or AES"),
    kind: KeyKind = typer.Option(KeyKind.private, "--kind", help="symmetric|private"),
    output: Optional[Path] = typer.Option(None, "-o", help="Write descriptor to file"),
):
    """Generate a new key and print its descriptor"""
    factory = _factory()
    try:
        if kind is KeyKind.symmetric:
            key: CryptographyKey = factory.generate_symmetric_key(algorithm)
        else:
            key = factory.generate_private_key(algorithm)
    except CryptoKeyError as exc:
        _fail(exc)
    _emit(key, output)


@app.command("public")
def public(
    input: Path = typer.Option(..., "-i", exists=True, readable=True, help="Private key descriptor (JSON)"),
    output: Optional[Path] = typer.Option(None, "-o", help="Write descriptor to file"),
):
    """Print the public key descriptor of a private key"""
    try:
        private_key = _factory().parse_private_key(_read_descriptor(input))
        public_key = private_key.get_public_key()
    except CryptoKeyError as exc:
        _fail(exc)
    _emit(public_key, output)


@app.command("match")
def match(
    private: Path = typer.Option(..., "--private", exists=True, readable=True),
    public: Path = typer.Option(..., "--public", exists=True, readable=True),
):
    """Check that a private and a public key descriptor form a pair"""
    factory = _factory()
    try:
        private_key = factory.parse_private_key(_read_descriptor(private))
        public_key = factory.parse_public_key(_read_descriptor(public))
        ok = match_asymmetric(private_key, public_key)
    except CryptoKeyError as exc:
        _fail(exc)
    typer.echo("Match OK" if ok else "Match FAILED")
    raise typer.Exit(code=0 if ok else 2)


if __name__ == "__main__":  # pragma: no cover
    app()
