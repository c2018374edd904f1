"""Root exception type and exit status shared by every vcsnote error family."""


class VCSNoteError(Exception):
    """Base exception for all vcsnote errors.

    Attributes:
        exit_code: Process exit status the CLI should terminate with.
    """

    def __init__(self, message: str, exit_code: int = 1):
        super().__init__(message)
        self.exit_code = exit_code


# Exit status used by shells when a command cannot be found
COMMAND_NOT_FOUND = 127
