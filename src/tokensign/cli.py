"""tokensign CLI - Sign and verify HMAC token signatures."""

import sys

import click
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from tokensign.common.errors import TokenSignError
from tokensign.common.logging import setup_logging
from tokensign.common.settings import Settings, get_settings
from tokensign.signing import AlgorithmType, HmacKey, digest_for, signature_length

console = Console()

EXIT_INVALID = 1
EXIT_ERROR = 2

ALGORITHM_CHOICE = click.Choice([algorithm.value for algorithm in AlgorithmType])


def _load_settings() -> Settings:
    try:
        return get_settings()
    except ValidationError as e:
        console.print(f"[red]Invalid configuration: {escape(str(e))}[/red]")
        sys.exit(EXIT_ERROR)


def _build_key(settings: Settings, alg: str | None, secret: str | None) -> HmacKey:
    algorithm = alg or settings.algorithm
    if secret is None and settings.secret is not None:
        secret = settings.secret.get_secret_value()
    if not secret:
        console.print("[red]No secret given (use --secret or TOKENSIGN_SECRET)[/red]")
        sys.exit(EXIT_ERROR)

    try:
        return HmacKey.from_algorithm(algorithm, secret)
    except TokenSignError as e:
        console.print(f"[red]Error: {escape(e.message)}[/red]")
        sys.exit(EXIT_ERROR)


@click.group()
@click.pass_context
def cli(ctx: click.Context) -> None:
    """tokensign CLI - HMAC signatures for compact tokens."""
    ctx.ensure_object(dict)
    if "settings" not in ctx.obj:
        ctx.obj["settings"] = _load_settings()


@cli.command("algorithms")
def list_algorithms() -> None:
    """List supported algorithms."""
    table = Table(title="Supported Algorithms")
    table.add_column("Algorithm", style="cyan")
    table.add_column("Digest", style="green")
    table.add_column("Signature Bytes", style="yellow")

    for algorithm in AlgorithmType:
        table.add_row(
            algorithm.value,
            digest_for(algorithm).name.upper(),
            str(signature_length(algorithm)),
        )

    console.print(table)


@cli.command("sign")
@click.option("--header", "-H", required=True, help="Encoded header segment")
@click.option("--claims", "-c", required=True, help="Encoded claims segment")
@click.option("--alg", "-a", type=ALGORITHM_CHOICE, help="Algorithm (default: from settings)")
@click.option("--secret", "-k", help="Shared secret (default: TOKENSIGN_SECRET)")
@click.pass_context
def sign_cmd(
    ctx: click.Context,
    header: str,
    claims: str,
    alg: str | None,
    secret: str | None,
) -> None:
    """Print the signature of HEADER.CLAIMS."""
    with _build_key(ctx.obj["settings"], alg, secret) as key:
        try:
            signature = key.sign(header, claims)
        except TokenSignError as e:
            console.print(f"[red]Error: {escape(e.message)}[/red]")
            sys.exit(EXIT_ERROR)

    # Plain echo keeps long signatures on one line
    click.echo(signature)


@cli.command("verify")
@click.option("--header", "-H", required=True, help="Encoded header segment")
@click.option("--claims", "-c", required=True, help="Encoded claims segment")
@click.option("--signature", "-s", required=True, help="Base64url signature")
@click.option("--alg", "-a", type=ALGORITHM_CHOICE, help="Algorithm (default: from settings)")
@click.option("--secret", "-k", help="Shared secret (default: TOKENSIGN_SECRET)")
@click.pass_context
def verify_cmd(
    ctx: click.Context,
    header: str,
    claims: str,
    signature: str,
    alg: str | None,
    secret: str | None,
) -> None:
    """Verify a signature over HEADER.CLAIMS."""
    with _build_key(ctx.obj["settings"], alg, secret) as key:
        try:
            is_valid = key.verify(header, claims, signature)
        except TokenSignError as e:
            console.print(f"[red]Error: {escape(e.message)}[/red]")
            sys.exit(EXIT_ERROR)
        algorithm = key.algorithm_type

    if is_valid:
        console.print(f"[green]✓ Signature is valid ({algorithm})[/green]")
    else:
        console.print(f"[red]✗ Signature is invalid ({algorithm})[/red]")
        sys.exit(EXIT_INVALID)


def main() -> None:
    """CLI entry point."""
    settings = _load_settings()
    setup_logging(settings.log_level, settings.log_json)
    cli(obj={"settings": settings})


if __name__ == "__main__":
    main()
