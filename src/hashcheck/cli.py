"""Typer-based command line interface for hashcheck."""
from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from utils.config import AppConfig, load_config
from utils.hashing import file_sha1
from utils.logging import configure_logging, get_logger
from utils.paths import normalise_path

from .sha1 import Sha1Validator

app = typer.Typer(add_completion=False)
console = Console()
LOGGER = get_logger(__name__)


def _resolve_path(path: Path) -> Path:
    resolved = normalise_path(path)
    if not resolved.exists():
        raise typer.BadParameter(f"Path {path} does not exist")
    return resolved


@app.callback()
def main(ctx: typer.Context, verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging.")) -> None:
    ctx.obj = {"verbose": verbose}
    configure_logging("DEBUG" if verbose else "INFO")


@app.command()
def check(
    ctx: typer.Context,
    paths: List[Path] = typer.Argument(..., help="Files to validate."),
    hashes: List[str] = typer.Option([], "--hash", "-H", help="Accepted SHA1 digest; repeat for several."),
    config_path: Optional[Path] = typer.Option(None, "--config", help="YAML file providing digests and messages."),
) -> None:
    """Validate files against the accepted SHA1 digests."""

    config = load_config(config_path) if config_path is not None else AppConfig()
    verbose = bool(ctx.obj and ctx.obj.get("verbose"))
    if config_path is not None and not verbose:
        configure_logging(config.log_level)
    validator = Sha1Validator(config)
    if hashes:
        validator.add_hash(hashes)
    if not validator.get_hash():
        raise typer.BadParameter("No SHA1 digest given; use --hash or --config")

    failures = 0
    for path in paths:
        if validator.is_valid(path):
            typer.echo(f"OK {path}")
            continue
        failures += 1
        for message in validator.get_messages().values():
            console.print(message, style="red", soft_wrap=True, markup=False, highlight=False)
    LOGGER.info("Checked %d file(s), %d failed", len(paths), failures)
    if failures:
        raise typer.Exit(code=1)


@app.command()
def digest(paths: List[Path] = typer.Argument(..., help="Files to hash.")) -> None:
    """Print SHA1 digests in ``sha1sum`` layout."""

    for path in paths:
        resolved = _resolve_path(path)
        typer.echo(f"{file_sha1(resolved)}  {path}")


if __name__ == "__main__":
    app()
