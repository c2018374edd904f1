"""Base class shared by the Jujutsu and Git backends."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

import typer

from vcsnote.models import OutputMode
from vcsnote.vcs.exceptions import DiffConsistencyError, VCSCommandError
from vcsnote.vcs.runner import run_tool


class VCSBackend(ABC):
    """Abstract base class for version control backends.

    Subclasses know how to detect pending changes, capture their diff and
    record a message for them. Nothing outside the selector and the concrete
    subclasses branches on which backend is active.
    """

    #: Executable name, also used as the --tool value
    name: str = ""
    #: Human-readable backend name
    display_name: str = ""
    #: Whether edit() needs the message written to a file first
    edit_uses_message_file: bool = False
    #: Remediation shown when there is nothing to describe
    no_changes_hint: str = ""

    @abstractmethod
    def has_pending_changes(self) -> bool:
        """Check whether there is anything to describe.

        Raises:
            VCSCommandError: If the backend command fails.
        """
        pass

    @abstractmethod
    def _diff_args(self) -> list[str]:
        """Arguments that print the pending diff."""
        pass

    @abstractmethod
    def commit(self, message: str) -> None:
        """Record the pending changes with the given message.

        Raises:
            VCSCommandError: If the backend command fails.
        """
        pass

    @abstractmethod
    def edit(self, message: str, message_file: Optional[Path] = None) -> None:
        """Let the user edit the message in the backend's editor, then record it.

        Args:
            message: The generated message.
            message_file: File holding the message, for backends that read it
                from disk (see edit_uses_message_file).

        Raises:
            VCSCommandError: If the backend command fails.
        """
        pass

    def capture_diff(self) -> str:
        """Capture the pending diff exactly as the backend prints it.

        Returns:
            The diff text, untouched.

        Raises:
            VCSCommandError: If the diff command fails.
            DiffConsistencyError: If the diff is empty although pending
                changes were reported.
        """
        args = self._diff_args()
        result = run_tool(self.name, args)
        if result.returncode != 0:
            stderr = (result.stderr or "").strip()
            raise VCSCommandError(
                f"Failed to capture diff: {self.name} {' '.join(args)}\n{stderr}".rstrip(),
                exit_code=result.returncode,
                command=[self.name] + args,
                stderr=stderr,
            )

        diff = result.stdout or ""
        if not diff.strip():
            raise DiffConsistencyError(
                f"Internal consistency error: {self.display_name} reported pending "
                f"changes but `{self.name} {' '.join(args)}` produced an empty diff."
            )
        return diff

    def apply(
        self,
        message: str,
        mode: OutputMode,
        message_file: Optional[Path] = None,
    ) -> None:
        """Apply the message with the given mode.

        Raises:
            ValueError: For PRINT, which is not a backend action.
        """
        if mode == OutputMode.COMMIT:
            self.commit(message)
        elif mode == OutputMode.EDIT:
            self.edit(message, message_file=message_file)
        else:
            raise ValueError(f"{mode.value} is not a backend action")

    def _run_recording_command(self, args: list[str]) -> None:
        """Run a non-interactive command that records a message.

        Output is relayed to stderr; failures keep the tool's exit code.
        """
        result = run_tool(self.name, args)
        for stream in (result.stdout, result.stderr):
            if stream and stream.strip():
                typer.echo(stream.rstrip(), err=True)
        if result.returncode != 0:
            raise VCSCommandError(
                f"{self.name} {args[0]} failed with exit code {result.returncode}.",
                exit_code=result.returncode,
                command=[self.name] + args,
                stderr=(result.stderr or "").strip(),
            )

    def _run_interactive_command(self, args: list[str]) -> None:
        """Run a command that opens the user's editor on the terminal."""
        result = run_tool(self.name, args, interactive=True)
        if result.returncode != 0:
            raise VCSCommandError(
                f"{self.name} {args[0]} failed with exit code {result.returncode}.",
                exit_code=result.returncode,
                command=[self.name] + args,
            )
