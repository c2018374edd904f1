"""Shared utility functions for CLI commands."""

from typing import Optional

import typer
from pydantic import ValidationError

from vcsnote import __version__, config
from vcsnote.models import BackendKind
from vcsnote.vcs.selector import parse_backend_name


VALID_TOOLS = "jj, git"


def version_callback(value: bool) -> None:
    """Print the version and exit when --version is given."""
    if value:
        typer.echo(f"vcsnote {__version__}")
        raise typer.Exit(0)


def resolve_requested_backend(tool: Optional[str]) -> Optional[BackendKind]:
    """Resolve the explicitly requested backend, if any.

    The --tool flag wins over VCSNOTE_TOOL and the `tool` config key.
    load_config() must have been called first.

    Args:
        tool: Value of --tool, or None.

    Returns:
        The requested BackendKind, or None to use default precedence.

    Raises:
        typer.Exit: With code 1 if the name is not a known backend.
    """
    name = tool or config.PREFERRED_TOOL
    if not name:
        return None

    try:
        return parse_backend_name(name)
    except ValueError:
        source = "--tool" if tool else "configured tool"
        typer.echo(f"Invalid {source}: {name}", err=True)
        typer.echo(f"Valid tools: {VALID_TOOLS}", err=True)
        raise typer.Exit(1)


def echo_warnings(warnings: list[str]) -> None:
    """Print message shape warnings to stderr."""
    for warning in warnings:
        typer.echo(f"Warning: {warning}", err=True)


def format_validation_error(error: ValidationError) -> str:
    """Render a pydantic ValidationError as one line per field."""
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
        for err in error.errors()
    )
