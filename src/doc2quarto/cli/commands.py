"""CLI command implementations"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from doc2quarto.config import Settings, load_config
from doc2quarto.core.errors import ConversionError
from doc2quarto.core.models import EventKindEnum, FileEvent, WalkReport
from doc2quarto.core.transform import convert_content
from doc2quarto.core.walk import count_files, is_markdown, walk_tree


_FILE_EVENTS = {
    EventKindEnum.transformed,
    EventKindEnum.copied,
    EventKindEnum.skipped,
    EventKindEnum.failed,
}


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def _configure_logging(settings: Settings) -> None:
    """Per-entry log lines only with --verbose; otherwise the progress bar and summary report."""
    level = logging.DEBUG if settings.verbose else logging.CRITICAL
    logging.basicConfig(level=level, format=settings.log_format, force=True)


def _progress_advancer(bar):
    """Return an on_event callback that advances bar once per visited file."""
    def _advance(event: FileEvent) -> None:
        if event.kind in _FILE_EVENTS:
            bar.update(1)
    return _advance


def _echo_summary(report: WalkReport, dry_run: bool) -> None:
    """Print the aggregate counts, then every failure and warning of the run."""
    prefix = "Dry run complete" if dry_run else "Conversion complete"
    typer.echo(
        f"{prefix} - "
        f"{report.transformed} transformed, "
        f"{report.copied} copied, "
        f"{report.directories} directories created, "
        f"{report.skipped} skipped, "
        f"{report.failed} failed, "
        f"{len(report.warnings)} warnings"
    )
    for warning in report.warnings:
        typer.echo(f"  {typer.style('!', fg='yellow')} {warning.path}: {warning.warning}")
    for failure in report.failures:
        typer.echo(f"  {typer.style('✗', fg='red')} {failure.path}: {failure.error}", err=True)


def convert_cmd(
    source: Annotated[Path, typer.Argument(help="Source Docusaurus docs directory")],
    dest: Annotated[Path, typer.Argument(help="Destination Quarto directory")],
    dry_run: Annotated[Optional[bool], typer.Option("--dry-run", help="Convert and report without writing files")] = None,
    verbose: Annotated[Optional[bool], typer.Option("--verbose", "-v", help="Log every visited entry")] = None,
    protect: Annotated[Optional[bool], typer.Option("--protect-code-fences/--no-protect-code-fences", help="Ignore ::: lines inside fenced code")] = None,
    ):
    """Mirror SOURCE into DEST: .md/.mdx become .qmd, everything else is copied."""
    settings = _settings(overrides={"dry_run": dry_run, "verbose": verbose, "protect_code_fences": protect})
    _configure_logging(settings)

    typer.echo(typer.style("Doc2Quarto - Docusaurus to Quarto Converter", fg="cyan", bold=True))
    if settings.dry_run:
        typer.echo("Dry run: no files will be written")

    try:
        if settings.verbose:
            report = walk_tree(source, dest, settings)
        else:
            with typer.progressbar(length=count_files(source), label="Converting") as bar:
                report = walk_tree(source, dest, settings, on_event=_progress_advancer(bar))
    except ConversionError as e:
        _fail(str(e))
    _echo_summary(report, settings.dry_run)


def preview_cmd(
    path: Annotated[Path, typer.Argument(help="Markdown file to convert to stdout")],
    protect: Annotated[Optional[bool], typer.Option("--protect-code-fences/--no-protect-code-fences", help="Ignore ::: lines inside fenced code")] = None,
    ):
    """Print the Quarto conversion of a single .md/.mdx file."""
    settings = _settings(overrides={"protect_code_fences": protect})
    if not path.is_file() or not is_markdown(path):
        _fail(f"Not a markdown file: {path}")
    try:
        content = path.read_bytes().decode('utf-8')
    except (OSError, UnicodeDecodeError) as e:
        _fail(f"Cannot read {path}", e)

    result = convert_content(content, settings.protect_code_fences, settings.parser_config)
    typer.echo(result.content, nl=False)
    for warning in result.warnings:
        typer.echo(f"Warning: {warning}", err=True)
