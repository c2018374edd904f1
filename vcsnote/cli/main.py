"""Main CLI command for generating commit messages."""

from typing import Optional

import typer
from pydantic import ValidationError

from vcsnote import config
from vcsnote.config import load_config
from vcsnote.dispatch import dispatch_message
from vcsnote.formatters import check_message_shape
from vcsnote.llm import LLMError, MissingAPIKeyError, generate_commit_message
from vcsnote.models import OutputMode, RunOptions
from vcsnote.tempfiles import TempResourceError
from vcsnote.vcs import (
    NoPendingChangesError,
    VCSCommandError,
    VCSError,
    ensure_pending_changes,
    get_backend,
    probe_environment,
    select_backend,
)
from vcsnote.cli.utils import (
    echo_warnings,
    format_validation_error,
    resolve_requested_backend,
    version_callback,
)


def main_command(
    ctx: typer.Context,
    tool: Optional[str] = typer.Option(
        None,
        "--tool",
        help="Backend to use: jj or git (default: jj if available, else git)",
    ),
    model: Optional[str] = typer.Option(
        None,
        "--model",
        "-m",
        help="Model identifier passed to the generation provider",
    ),
    commit: bool = typer.Option(
        False,
        "--commit",
        "-c",
        help="Commit the pending changes with the generated message",
    ),
    edit: bool = typer.Option(
        False,
        "--edit",
        "-e",
        help="Open the generated message in the backend's editor before committing",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Generate a Conventional Commit message from pending Jujutsu or Git changes."""
    # If a subcommand is invoked, don't run the default behavior
    if ctx.invoked_subcommand is not None:
        return

    try:
        mode = OutputMode.from_flags(commit, edit)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    load_config()

    requested = resolve_requested_backend(tool)
    try:
        options = RunOptions(
            tool=requested,
            model=model if model is not None else config.ACTIVE_MODEL,
            mode=mode,
        )
    except ValidationError as e:
        typer.echo(f"Error: Invalid options: {format_validation_error(e)}", err=True)
        raise typer.Exit(1)

    try:
        # Step 1: Pick the backend
        availability = probe_environment()
        backend = get_backend(select_backend(availability, options.tool))
        typer.echo(f"Using {backend.display_name} backend.", err=True)

        # Step 2: Make sure there is something to describe
        ensure_pending_changes(backend)

        # Step 3: Capture the diff
        typer.echo("Capturing diff...", err=True)
        diff = backend.capture_diff()

        # Step 4: Generate the message
        typer.echo(f"Generating commit message with {options.model}...", err=True)
        result = generate_commit_message(diff, model=options.model)
        echo_warnings(check_message_shape(result.message))

        # Step 5: Print, commit or edit
        dispatch_message(backend, result.message, options.mode)

    except NoPendingChangesError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(e.exit_code)
    except VCSCommandError as e:
        typer.echo(f"VCS error: {e}", err=True)
        raise typer.Exit(e.exit_code)
    except VCSError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(e.exit_code)
    except MissingAPIKeyError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(e.exit_code)
    except LLMError as e:
        typer.echo(f"LLM error: {e}", err=True)
        raise typer.Exit(e.exit_code)
    except TempResourceError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(e.exit_code)
