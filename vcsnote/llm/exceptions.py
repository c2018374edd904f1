"""LLM-related exception classes.

Contains all exception classes for message generation:
- LLMError: Base exception for generation errors
- MissingAPIKeyError: Raised when an API key is not set
- GenerationServiceError: The generation command exited non-zero
- EmptyGenerationError: The generation returned only whitespace
"""

from vcsnote.errors import VCSNoteError


class LLMError(VCSNoteError):
    """Base exception for LLM-related errors."""

    pass


class MissingAPIKeyError(LLMError):
    """Raised when the required API key is not set."""

    pass


class GenerationServiceError(LLMError):
    """Raised when the generation service fails.

    exit_code is the service's own exit status.
    """

    def __init__(self, message: str, exit_code: int = 1, stderr: str = ""):
        super().__init__(message, exit_code=exit_code)
        self.stderr = stderr


class EmptyGenerationError(LLMError):
    """Raised when the generated message is empty after trimming."""

    pass
