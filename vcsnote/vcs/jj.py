"""Jujutsu backend: describes the working-copy change."""

from pathlib import Path
from typing import Optional

from vcsnote.vcs.base import VCSBackend
from vcsnote.vcs.runner import _run_jj_command


class JujutsuBackend(VCSBackend):
    """Jujutsu backend.

    Every file change in the working copy is part of the working-copy change,
    so there is no staging step.
    """

    name = "jj"
    display_name = "Jujutsu"
    edit_uses_message_file = True
    no_changes_hint = (
        "No Jujutsu working-copy changes found. Check the working copy with: jj status"
    )

    def has_pending_changes(self) -> bool:
        """Check whether the working-copy change touches any file."""
        return bool(_run_jj_command(["diff", "--summary"]))

    def _diff_args(self) -> list[str]:
        return ["diff", "--git"]

    def commit(self, message: str) -> None:
        """Describe the working-copy change and start a new one on top."""
        self._run_recording_command(["commit", "--message", message])

    def edit(self, message: str, message_file: Optional[Path] = None) -> None:
        """Open jj's editor pre-filled from message_file, then describe.

        The editor keeps the terminal as its stdin; the file only supplies
        the initial text.

        Raises:
            ValueError: If message_file is not given.
        """
        if message_file is None:
            raise ValueError("Jujutsu edit requires a message file")
        initial = message_file.read_text(encoding="utf-8")
        self._run_interactive_command(["describe", "--edit", "--message", initial])
