"""Typer CLI for the diff viewer core."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Annotated, Any

import typer

from diffview.config import DiffViewConfigError, DiffViewSettings, load_settings
from diffview.diff_parser import parse_diff
from diffview.file_tree import PullRequestFilesError, build_file_tree, parse_pull_request_files
from diffview.inline_highlight import compute_inline_highlights, highlight_patch
from diffview.observability import configure_logging
from diffview.output import build_diff_artifact, build_tree_artifact

app = typer.Typer(help="Parse unified diff patches into structured, highlighted lines.")

logger = logging.getLogger(__name__)


def _prepare(verbose: bool) -> DiffViewSettings:
    """Load settings and configure logging for one command run."""
    try:
        settings = load_settings()
    except DiffViewConfigError as error:
        typer.echo(f"Configuration error: {error}", err=True)
        raise typer.Exit(code=1) from error
    configure_logging(logging.DEBUG if verbose else settings.log_level)
    return settings


def _read_text(source: str) -> str:
    """Read text from a file path, or from stdin when the source is ``-``."""
    if source == "-":
        return typer.get_text_stream("stdin").read()
    try:
        return Path(source).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as error:
        typer.echo(f"Could not read '{source}': {error}", err=True)
        raise typer.Exit(code=1) from error


def _read_files_payload(source: str) -> Any:
    """Read and decode a saved pull request files JSON payload."""
    text = _read_text(source)
    try:
        return json.loads(text)
    except json.JSONDecodeError as error:
        typer.echo(f"Invalid JSON in '{source}': {error}", err=True)
        raise typer.Exit(code=1) from error


def _echo_json(payload: dict[str, Any]) -> None:
    typer.echo(json.dumps(payload, indent=2))


@app.command("parse")
def parse_command(
    patch_file: Annotated[
        str, typer.Argument(help="Patch file to parse, or '-' to read stdin.")
    ] = "-",
    highlight: Annotated[
        bool | None,
        typer.Option(
            "--highlight/--no-highlight",
            help="Add word-level segments to remove/add pairs (default from settings).",
        ),
    ] = None,
    path: Annotated[str | None, typer.Option(help="File path to record in the output.")] = None,
    verbose: Annotated[bool, typer.Option(help="Log debug details to stderr.")] = False,
) -> None:
    """Parse one patch and print its lines as JSON."""
    settings = _prepare(verbose)
    if highlight is None:
        highlight = settings.inline_highlights
    lines = parse_diff(_read_text(patch_file))
    if highlight:
        lines = compute_inline_highlights(lines)
    _echo_json(build_diff_artifact(lines, path=path))


@app.command("tree")
def tree_command(
    files_json: Annotated[
        str, typer.Argument(help="Saved pull request files JSON array, or '-' for stdin.")
    ],
    verbose: Annotated[bool, typer.Option(help="Log debug details to stderr.")] = False,
) -> None:
    """Print the changed-file tree for a pull request files listing."""
    _prepare(verbose)
    try:
        files = parse_pull_request_files(_read_files_payload(files_json))
    except PullRequestFilesError as error:
        typer.echo(f"Invalid pull request files payload: {error}", err=True)
        raise typer.Exit(code=1) from error
    _echo_json(build_tree_artifact(build_file_tree(files)))


@app.command("files")
def files_command(
    files_json: Annotated[
        str, typer.Argument(help="Saved pull request files JSON array, or '-' for stdin.")
    ],
    verbose: Annotated[bool, typer.Option(help="Log debug details to stderr.")] = False,
) -> None:
    """Parse every patch in a pull request files listing and print them as JSON."""
    settings = _prepare(verbose)
    try:
        files = parse_pull_request_files(_read_files_payload(files_json))
    except PullRequestFilesError as error:
        typer.echo(f"Invalid pull request files payload: {error}", err=True)
        raise typer.Exit(code=1) from error

    artifacts: list[dict[str, Any]] = []
    warnings: list[str] = []
    for changed_file in files:
        if changed_file.patch is None:
            warnings.append(f"{changed_file.path}: no patch available (binary or too large).")
            logger.info("Skipping %s: no patch in files listing.", changed_file.path)
            artifacts.append(build_diff_artifact((), path=changed_file.path))
            continue
        lines = highlight_patch(changed_file.patch, settings=settings)
        artifacts.append(build_diff_artifact(lines, path=changed_file.path))

    _echo_json({"schema_version": "v1", "files": artifacts, "warnings": warnings})
