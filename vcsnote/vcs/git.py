"""Git backend: describes and commits the staged index."""

from pathlib import Path
from typing import Optional

from vcsnote.vcs.base import VCSBackend
from vcsnote.vcs.exceptions import VCSCommandError
from vcsnote.vcs.runner import run_tool


class GitBackend(VCSBackend):
    """Git backend.

    Only staged changes are pending; unstaged edits are ignored.
    """

    name = "git"
    display_name = "Git"
    edit_uses_message_file = False
    no_changes_hint = (
        "No staged Git changes found. Please stage files first with: git add <files>"
    )

    def has_pending_changes(self) -> bool:
        """Check whether the index differs from HEAD.

        `git diff --cached --quiet` exits 1 when there are staged changes and
        0 when there are none.
        """
        args = ["diff", "--cached", "--quiet"]
        result = run_tool(self.name, args)
        if result.returncode == 0:
            return False
        if result.returncode == 1:
            return True
        stderr = (result.stderr or "").strip()
        raise VCSCommandError(
            f"Command failed: git {' '.join(args)}\n{stderr}".rstrip(),
            exit_code=result.returncode,
            command=[self.name] + args,
            stderr=stderr,
        )

    def _diff_args(self) -> list[str]:
        return ["diff", "--cached"]

    def commit(self, message: str) -> None:
        self._run_recording_command(["commit", "--message", message])

    def edit(self, message: str, message_file: Optional[Path] = None) -> None:
        # git opens its own editor pre-filled with --message
        self._run_interactive_command(["commit", "--edit", "--message", message])
