"""Routing of a generated message to its terminal action.

Contains:
- dispatch_message: Print, commit or edit-then-commit the message
"""

from typing import IO, Optional

import typer

from vcsnote.models import OutputMode
from vcsnote.tempfiles import ScopedTempFile
from vcsnote.vcs.base import VCSBackend


def dispatch_message(
    backend: VCSBackend,
    message: str,
    mode: OutputMode,
    out: Optional[IO] = None,
) -> None:
    """Apply the generated message.

    Exactly one action runs. PRINT writes only the message to stdout. EDIT
    owns the temporary message file for backends that need one; it is removed
    whether or not the edit succeeds.

    Args:
        backend: The active backend.
        message: The validated, trimmed message.
        mode: The action to take.
        out: Stream for PRINT mode (defaults to stdout).

    Raises:
        VCSCommandError: If the commit or edit command fails.
        TempResourceError: If the message file cannot be created.
    """
    if mode == OutputMode.PRINT:
        typer.echo(message, file=out)

    elif mode == OutputMode.COMMIT:
        typer.echo(f"Committing with {backend.display_name}...", err=True)
        backend.apply(message, OutputMode.COMMIT)
        typer.echo("Commit successful!", err=True)

    elif mode == OutputMode.EDIT:
        typer.echo(f"Opening {backend.display_name} editor...", err=True)
        if backend.edit_uses_message_file:
            with ScopedTempFile(message) as message_file:
                backend.apply(message, OutputMode.EDIT, message_file=message_file)
        else:
            backend.apply(message, OutputMode.EDIT)
        typer.echo("Message recorded.", err=True)

    else:
        raise ValueError(f"Unsupported output mode: {mode}")
