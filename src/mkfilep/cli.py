"""Command-line entry point for mkfilep."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Optional, Sequence

import typer

from mkfilep import __version__
from mkfilep.config import ConfigError, load_config
from mkfilep.creator import try_create_file_at_path
from mkfilep.util.logging import configure_logging
from mkfilep.util.paths import config_path_from_option

PROG_NAME = "mkfilep"
HELP_FLAGS = ("-h", "--help")
VERSION_FLAGS = ("-v", "--version")

HELP_TEXT = """
mkfilep - Create a file and all non-existent parent directories in its path

USAGE:
  mkfilep <file-path>
  python -m mkfilep <file-path>

OPTIONS:
  -h, --help           Display this help message
  -v, --version        Display package version
  -c, --config PATH    Read settings from a YAML, TOML or JSON file
  --strict             Fail if the file already exists
  --verbose            Log diagnostic messages to stderr

EXAMPLES:
  mkfilep path/to/your/new/file.txt
  mkfilep src/components/Button/index.js
  mkfilep ./docs/api/readme.md

DESCRIPTION:
  Creates a file at the specified path, automatically creating all
  parent directories that don't exist. Similar to 'mkdir -p' combined
  with 'touch'. Will not overwrite existing files.

FEATURES:
  ✓ Creates nested directory structures
  ✓ Works with relative and absolute paths
  ✓ Cross-platform (Windows, macOS, Linux)
  ✓ Won't overwrite existing files
"""

USAGE_HINT = f"\nUsage: {PROG_NAME} <file-path>\nRun \"{PROG_NAME} --help\" for more information"

app = typer.Typer(add_completion=False, help="Create a file and its missing parent directories")


def _fail(message: str) -> None:
    typer.echo(f"✗ Error: {message}", err=True)


def _help_callback(value: bool) -> None:
    if value:
        typer.echo(HELP_TEXT)
        raise typer.Exit()


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"v{__version__}")
        raise typer.Exit()


@app.command(context_settings={"help_option_names": [], "allow_extra_args": True})
def create(
    ctx: typer.Context,
    file_path: Optional[str] = typer.Argument(None, metavar="FILE_PATH", help="File to create"),
    show_help: bool = typer.Option(
        False,
        "--help",
        "-h",
        is_eager=True,
        expose_value=False,
        callback=_help_callback,
        help="Display this help message",
    ),
    show_version: bool = typer.Option(
        False,
        "--version",
        "-v",
        is_eager=True,
        expose_value=False,
        callback=_version_callback,
        help="Display package version",
    ),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Settings file (YAML, TOML or JSON)"),
    strict: bool = typer.Option(False, "--strict", help="Fail if the file already exists"),
    verbose: bool = typer.Option(False, "--verbose", help="Log diagnostic messages to stderr"),
) -> None:
    """Create FILE_PATH and any missing parent directories."""

    if file_path is None:
        typer.echo(HELP_TEXT)
        return

    if not file_path:
        _fail("No file path provided")
        typer.echo(USAGE_HINT, err=True)
        raise typer.Exit(code=1)

    overrides: dict[str, Any] = {}
    if strict:
        overrides["creation.exist_ok"] = False
    if verbose:
        overrides["logging.level"] = "DEBUG"

    try:
        cfg = load_config(config_path_from_option(config) if config else None, overrides=overrides)
    except ConfigError as exc:
        _fail(str(exc))
        raise typer.Exit(code=1)

    logger = configure_logging(level=cfg.logging.level, log_path=cfg.logging.log_path)
    if ctx.args:
        logger.debug("Ignoring extra arguments: %s", ctx.args)
    logger.debug("Creating %r (exist_ok=%s)", file_path, cfg.creation.exist_ok)

    result = try_create_file_at_path(file_path, exist_ok=cfg.creation.exist_ok)
    if result.error is not None:
        logger.debug("Creation failed kind=%s", result.error.kind.value)
        _fail(result.error.message)
        raise typer.Exit(code=1)

    if result.created:
        logger.debug("Created %s", result.path)
    else:
        logger.debug("File already present, left untouched: %s", result.path)
    typer.echo(f"✓ Successfully created: {result.path}")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and return its exit code; any failure maps to 1."""

    args = list(sys.argv[1:] if argv is None else argv)

    # help, then version, win over anything else on the line, bad options included
    if any(arg in HELP_FLAGS for arg in args):
        typer.echo(HELP_TEXT)
        return 0
    if any(arg in VERSION_FLAGS for arg in args):
        typer.echo(f"v{__version__}")
        return 0

    try:
        app(args=args, prog_name=PROG_NAME)
    except SystemExit as exc:
        return 0 if exc.code in (0, None) else 1
    return 0


__all__ = ["app", "main"]


if __name__ == "__main__":
    raise SystemExit(main())
