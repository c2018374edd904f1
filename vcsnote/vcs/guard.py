"""Pending-change guard run before any diff capture or generation."""

from vcsnote.vcs.base import VCSBackend
from vcsnote.vcs.exceptions import NoPendingChangesError


def ensure_pending_changes(backend: VCSBackend) -> None:
    """Fail fast when the backend has nothing to describe.

    Args:
        backend: The active backend.

    Raises:
        NoPendingChangesError: With the backend's remediation hint.
    """
    if not backend.has_pending_changes():
        raise NoPendingChangesError(backend.no_changes_hint)
