"""Click CLI commands for sha1-digest."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from sha1_digest.config import Settings, get_settings
from sha1_digest.hasher import sha1_file, sha1_text

console = Console()

DEMO_TEXT = (
    "`1234567890-=qwertyuiop[]asdfghjkl;'zxcvbnm,./~!@#$%^&*()_+"
    "QWERTYUIOP{}ASDFGHJKL:|ZXCVBNM<>? And some additional text to more changes and tests"
)


def _setup_logging(verbose: bool, level: str = "INFO") -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else getattr(logging, level),
        format="%(asctime)s %(levelname)-7s %(name)s  %(message)s",
        datefmt="%H:%M:%S",
    )


def _resolve_chunk_size(settings: Settings, chunk_size: int | None) -> int:
    """Command-line override wins over SHA1_CHUNK_SIZE / .env."""
    if chunk_size is None:
        return settings.chunk_size
    try:
        return get_settings(chunk_size=chunk_size).chunk_size
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--chunk-size") from exc


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """sha1-digest — SHA-1 digests of strings and files."""
    try:
        settings = get_settings()
    except ValueError as exc:
        raise click.UsageError(f"Invalid SHA1_* configuration:\n{exc}") from exc
    _setup_logging(verbose, settings.log_level)
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["settings"] = settings


# ---------------------------------------------------------------------------
# text
# ---------------------------------------------------------------------------


@cli.command("text")
@click.argument("texts", nargs=-1, required=True)
def text(texts: tuple[str, ...]) -> None:
    """Print the digest of each TEXT (UTF-8 encoded)."""
    for t in texts:
        click.echo(sha1_text(t))


# ---------------------------------------------------------------------------
# file
# ---------------------------------------------------------------------------


@cli.command("file")
@click.argument("paths", nargs=-1, required=True, type=click.Path(path_type=Path))
@click.option("--chunk-size", type=int, default=None, help="Read unit in bytes (multiple of 64).")
@click.pass_context
def file_cmd(ctx: click.Context, paths: tuple[Path, ...], chunk_size: int | None) -> None:
    """Print '<digest>  <path>' for each file, like sha1sum."""
    size = _resolve_chunk_size(ctx.obj["settings"], chunk_size)

    failed = 0
    for path in paths:
        digest = sha1_file(path, size)
        if not digest:
            console.print(f"[red]Can not hash[/red] {path}", highlight=False)
            failed += 1
            continue
        click.echo(f"{digest}  {path}")

    if failed:
        sys.exit(1)


# ---------------------------------------------------------------------------
# check
# ---------------------------------------------------------------------------


@cli.command("check")
@click.argument("expected")
@click.argument("path", type=click.Path(path_type=Path))
@click.option("--chunk-size", type=int, default=None, help="Read unit in bytes (multiple of 64).")
@click.pass_context
def check(ctx: click.Context, expected: str, path: Path, chunk_size: int | None) -> None:
    """Verify that PATH has the digest EXPECTED."""
    size = _resolve_chunk_size(ctx.obj["settings"], chunk_size)

    digest = sha1_file(path, size)
    if not digest:
        console.print(f"[red]Can not hash[/red] {path}", highlight=False)
        sys.exit(1)

    if digest == expected.strip().lower():
        console.print(f"{path}: [green]OK[/green]", highlight=False)
    else:
        console.print(f"{path}: [red]FAILED[/red] (got {digest})", highlight=False)
        sys.exit(1)


# ---------------------------------------------------------------------------
# demo
# ---------------------------------------------------------------------------


@cli.command("demo")
@click.option(
    "--path",
    type=click.Path(path_type=Path),
    default=None,
    help="File to hash (default: this package's hasher module).",
)
@click.pass_context
def demo(ctx: click.Context, path: Path | None) -> None:
    """Hash a sample string and a file and show both digests."""
    if path is None:
        path = Path(__file__).with_name("hasher.py")

    table = Table(title="SHA-1 demo")
    table.add_column("Input", style="cyan", max_width=60)
    table.add_column("Digest", no_wrap=True, min_width=40)

    table.add_row("sample text", sha1_text(DEMO_TEXT))
    file_digest = sha1_file(path, ctx.obj["settings"].chunk_size)
    table.add_row(str(path), file_digest or "[red]unreadable[/red]")

    console.print(table)
