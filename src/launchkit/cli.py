"""launchkit command line interface."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import NoReturn, Optional

import typer
from rich.console import Console
from rich.markdown import Markdown
from rich.markup import escape

from launchkit.config import get_settings
from launchkit.errors import LaunchkitError
from launchkit.parsing import (
    create_technical_summary,
    detect_status,
    extract_app_url,
    is_deployment_success,
    parse_message,
)

app = typer.Typer(
    name="launchkit",
    help="Parse generated-app chat messages for display.",
    add_completion=False,
    rich_markup_mode="rich",
)
console = Console()


def _read_message(path: Optional[Path]) -> str:
    if path is None or str(path) == "-":
        return sys.stdin.read()
    return path.read_text(encoding="utf-8")


def _exit_with_error(message: str) -> NoReturn:
    console.print(f"[bold red]Error:[/bold red] {escape(message)}", highlight=False)
    raise typer.Exit(1)


@app.command()
def parse(
    path: Optional[Path] = typer.Argument(None, help="Message file, or '-' for stdin"),  # noqa: B008
    hide_code: Optional[bool] = typer.Option(None, "--hide-code/--show-code", help="Redact fenced code blocks"),
    hide_markers: Optional[bool] = typer.Option(
        None, "--hide-markers/--show-markers", help="Collapse embedded files into a manifest"
    ),
    technical: Optional[bool] = typer.Option(
        None, "--technical/--no-technical", help="Keep code in a collapsible wrapper"
    ),
    user_type: Optional[str] = typer.Option(None, "--user-type", help="beginner, developer or admin"),
    as_json: bool = typer.Option(False, "--json", help="Print the parsed message as JSON"),
) -> None:
    """Parse one assistant message."""
    overrides: dict[str, object] = {}
    if hide_code is not None:
        overrides["hide_code_blocks"] = hide_code
    if hide_markers is not None:
        overrides["hide_file_markers"] = hide_markers
    if technical is not None:
        overrides["show_technical_details"] = technical
    if user_type is not None:
        overrides["user_type"] = user_type

    try:
        settings = get_settings()
        options = settings.parsing_options().merged(overrides)
        raw = _read_message(path)
    except (LaunchkitError, OSError) as exc:
        _exit_with_error(str(exc))

    parsed = parse_message(raw, options)
    if as_json:
        typer.echo(json.dumps(parsed.to_dict(), ensure_ascii=False, indent=2))
        return

    console.print(Markdown(parsed.content))
    label = parsed.deployment_status or "unknown"
    console.print(f"[dim]status={label} has_code={parsed.has_code} files={len(parsed.files_generated)}[/dim]")


@app.command()
def status(
    path: Optional[Path] = typer.Argument(None, help="Message file, or '-' for stdin"),  # noqa: B008
) -> None:
    """Show deployment details found in one assistant message."""
    try:
        settings = get_settings()
        raw = _read_message(path)
    except (LaunchkitError, OSError) as exc:
        _exit_with_error(str(exc))

    typer.echo(f"status: {detect_status(raw) or 'unknown'}")
    typer.echo(f"live: {'yes' if is_deployment_success(raw) else 'no'}")
    typer.echo(f"url: {extract_app_url(raw, settings.app_domain) or '-'}")
    summary = create_technical_summary(raw)
    if summary:
        typer.echo(f"summary: {summary}")
