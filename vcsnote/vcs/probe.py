"""Environment probing for supported version control backends.

Contains:
- Availability: Which backends are usable in the current directory
- is_jj_available: Check for a usable Jujutsu repository
- is_git_available: Check for a usable Git work tree
- probe_environment: Probe both backends
"""

import shutil
from dataclasses import dataclass

from vcsnote.vcs.exceptions import VCSError
from vcsnote.vcs.runner import run_tool


@dataclass(frozen=True)
class Availability:
    """Result of probing the environment for each backend."""

    jj: bool = False
    git: bool = False


def is_jj_available() -> bool:
    """Check that jj is installed and the cwd is inside a jj repository.

    Returns:
        True if `jj root` succeeds, False otherwise.
    """
    if not shutil.which("jj"):
        return False
    try:
        result = run_tool("jj", ["root"])
    except (VCSError, OSError):
        return False
    return result.returncode == 0


def is_git_available() -> bool:
    """Check that git is installed and the cwd is inside a work tree.

    Returns:
        True if `git rev-parse --is-inside-work-tree` reports "true".
    """
    if not shutil.which("git"):
        return False
    try:
        result = run_tool("git", ["rev-parse", "--is-inside-work-tree"])
    except (VCSError, OSError):
        return False
    return result.returncode == 0 and (result.stdout or "").strip() == "true"


def probe_environment() -> Availability:
    """Probe the current directory for usable backends.

    Probing never raises: an unusable backend is recorded as False.
    """
    return Availability(jj=is_jj_available(), git=is_git_available())
