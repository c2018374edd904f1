"""Backend selection.

Contains:
- parse_backend_name: Turn a user-supplied name into a BackendKind
- select_backend: Resolve the active backend from availability and preference
- get_backend: Instantiate the adapter for a selected backend
"""

from typing import Optional

from vcsnote.models import BackendKind
from vcsnote.vcs.base import VCSBackend
from vcsnote.vcs.exceptions import BackendUnavailableError, NoRepositoryError
from vcsnote.vcs.probe import Availability


# Accepted spellings for --tool, VCSNOTE_TOOL and the `tool` config key
BACKEND_ALIASES = {
    "jj": BackendKind.JJ,
    "jujutsu": BackendKind.JJ,
    "primary": BackendKind.JJ,
    "git": BackendKind.GIT,
    "legacy": BackendKind.GIT,
}

DISPLAY_NAMES = {
    BackendKind.JJ: "Jujutsu",
    BackendKind.GIT: "Git",
}


def parse_backend_name(name: str) -> BackendKind:
    """Parse a backend name.

    Args:
        name: Backend name such as "jj" or "git".

    Returns:
        The matching BackendKind.

    Raises:
        ValueError: If the name is not recognized.
    """
    try:
        return BACKEND_ALIASES[name.strip().lower()]
    except KeyError:
        raise ValueError(f"Unknown backend: {name}")


def _is_available(kind: BackendKind, availability: Availability) -> bool:
    if kind == BackendKind.JJ:
        return availability.jj
    if kind == BackendKind.GIT:
        return availability.git
    return False


def select_backend(
    availability: Availability,
    requested: Optional[BackendKind] = None,
) -> BackendKind:
    """Resolve the single backend used for this run.

    An explicit request wins if it is usable. Without one, Jujutsu is tried
    first, then Git.

    Args:
        availability: Result of probe_environment().
        requested: Backend explicitly asked for, if any.

    Returns:
        The selected BackendKind (never NONE).

    Raises:
        BackendUnavailableError: If the requested backend is not usable.
        NoRepositoryError: If no backend is usable.
    """
    if requested is not None and requested != BackendKind.NONE:
        if _is_available(requested, availability):
            return requested
        raise BackendUnavailableError(
            f"Requested backend not usable: {DISPLAY_NAMES[requested]} "
            f"({requested.value}) is not installed or this is not a "
            f"{DISPLAY_NAMES[requested]} repository."
        )

    if availability.jj:
        return BackendKind.JJ
    if availability.git:
        return BackendKind.GIT

    raise NoRepositoryError(
        "No recognized repository: run vcsnote from inside a Jujutsu or Git repository."
    )


def get_backend(kind: BackendKind) -> VCSBackend:
    """Create the adapter for a selected backend.

    Raises:
        ValueError: If kind is NONE.
    """
    if kind == BackendKind.JJ:
        from vcsnote.vcs.jj import JujutsuBackend

        return JujutsuBackend()

    elif kind == BackendKind.GIT:
        from vcsnote.vcs.git import GitBackend

        return GitBackend()

    else:
        raise ValueError(f"Unsupported backend: {kind}")
