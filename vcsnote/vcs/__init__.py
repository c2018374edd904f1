"""Version control backends for vcsnote.

This package provides backend detection and the two backend adapters:
- exceptions: VCSError and its subclasses
- runner: run_tool, _run_jj_command
- probe: Availability, probe_environment
- selector: parse_backend_name, select_backend, get_backend
- base: VCSBackend
- jj: JujutsuBackend
- git: GitBackend
- guard: ensure_pending_changes
"""

# Exceptions
from vcsnote.vcs.exceptions import (
    VCSError,
    BackendUnavailableError,
    NoRepositoryError,
    NoPendingChangesError,
    DiffConsistencyError,
    VCSCommandError,
)

# Runner utilities
from vcsnote.vcs.runner import (
    run_tool,
    _run_jj_command,
)

# Probing and selection
from vcsnote.vcs.probe import Availability, probe_environment
from vcsnote.vcs.selector import (
    parse_backend_name,
    select_backend,
    get_backend,
)

# Backends
from vcsnote.vcs.base import VCSBackend
from vcsnote.vcs.jj import JujutsuBackend
from vcsnote.vcs.git import GitBackend
from vcsnote.vcs.guard import ensure_pending_changes


__all__ = [
    # Exceptions
    "VCSError",
    "BackendUnavailableError",
    "NoRepositoryError",
    "NoPendingChangesError",
    "DiffConsistencyError",
    "VCSCommandError",
    # Runner
    "run_tool",
    "_run_jj_command",
    # Probing and selection
    "Availability",
    "probe_environment",
    "parse_backend_name",
    "select_backend",
    "get_backend",
    # Backends
    "VCSBackend",
    "JujutsuBackend",
    "GitBackend",
    "ensure_pending_changes",
]
