"""Run-level value types.

Contains:
- BackendKind: The backends vcsnote knows about
- OutputMode: What to do with the generated message
- RunOptions: Immutable options resolved from the command line and config
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator


class BackendKind(Enum):
    """Supported version control backends."""

    NONE = "none"
    JJ = "jj"
    GIT = "git"


class OutputMode(Enum):
    """Terminal action applied to the generated message."""

    PRINT = "print"
    COMMIT = "commit"
    EDIT = "edit"

    @classmethod
    def from_flags(cls, commit: bool, edit: bool) -> "OutputMode":
        """Resolve the mode from the --commit and --edit flags.

        Raises:
            ValueError: If both flags are set.
        """
        if commit and edit:
            raise ValueError("--commit and --edit are mutually exclusive")
        if commit:
            return cls.COMMIT
        if edit:
            return cls.EDIT
        return cls.PRINT


class RunOptions(BaseModel):
    """Options for a single vcsnote run.

    Attributes:
        tool: Backend explicitly requested, or None for default precedence.
        model: Model identifier passed to the generation provider.
        mode: Action applied to the generated message.
    """

    model_config = ConfigDict(frozen=True)

    tool: Optional[BackendKind] = None
    model: str
    mode: OutputMode = OutputMode.PRINT

    @field_validator("model")
    @classmethod
    def model_must_not_be_empty(cls, v: str) -> str:
        """Ensure a model identifier is given."""
        if not v or not v.strip():
            raise ValueError("Model cannot be empty")
        return v.strip()
