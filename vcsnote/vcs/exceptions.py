"""VCS-related exception classes.

Contains all exception classes for version control operations:
- VCSError: Base exception for VCS-related errors
- BackendUnavailableError: An explicitly requested backend is not usable
- NoRepositoryError: No supported repository found in the current directory
- NoPendingChangesError: Raised when there is nothing to describe
- DiffConsistencyError: Pending changes were reported but the diff is empty
- VCSCommandError: A jj/git command exited with a non-zero status
"""

from typing import Optional

from vcsnote.errors import VCSNoteError


class VCSError(VCSNoteError):
    """Custom exception for VCS-related errors."""

    pass


class BackendUnavailableError(VCSError):
    """Raised when the requested backend is not usable here."""

    pass


class NoRepositoryError(VCSError):
    """Raised when neither a Jujutsu nor a Git repository is detected."""

    pass


class NoPendingChangesError(VCSError):
    """Raised when there are no pending changes to describe."""

    pass


class DiffConsistencyError(VCSError):
    """Raised when the diff is empty after pending changes were detected."""

    pass


class VCSCommandError(VCSError):
    """Raised when an external VCS command fails.

    The exit code of the failed command is kept so the CLI can propagate it.
    """

    def __init__(
        self,
        message: str,
        exit_code: int = 1,
        command: Optional[list[str]] = None,
        stderr: str = "",
    ):
        super().__init__(message, exit_code=exit_code)
        self.command = command or []
        self.stderr = stderr
