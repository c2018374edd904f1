"""Scoped temporary message file.

Contains:
- TempResourceError: Raised when the temporary file cannot be created
- ScopedTempFile: Context manager owning one temporary message file
"""

import atexit
import os
import signal
import tempfile
import threading
from pathlib import Path
from typing import Optional

from vcsnote.errors import VCSNoteError


class TempResourceError(VCSNoteError):
    """Raised when the temporary message file cannot be created."""

    pass


# Termination signals that must not leave the file behind
_CLEANUP_SIGNALS = tuple(
    getattr(signal, name)
    for name in ("SIGINT", "SIGTERM", "SIGHUP")
    if hasattr(signal, name)
)


class ScopedTempFile:
    """A temporary file holding a commit message for the lifetime of a scope.

    The file is removed when the scope exits, when the interpreter exits and
    when the process receives SIGINT, SIGTERM or SIGHUP. Removal happens at
    most once no matter how many of those paths fire.

    Usage:
        with ScopedTempFile(message) as path:
            backend.edit(message, message_file=path)
    """

    def __init__(self, content: str, prefix: str = "vcsnote-", suffix: str = ".txt"):
        self.content = content
        self.prefix = prefix
        self.suffix = suffix
        self.path: Optional[Path] = None
        self._released = False
        self._previous_handlers: dict = {}

    def acquire(self) -> Path:
        """Create the file and write the message to it.

        Returns:
            Path to the new file.

        Raises:
            TempResourceError: If the file cannot be created or written.
        """
        try:
            fd, name = tempfile.mkstemp(prefix=self.prefix, suffix=self.suffix)
        except OSError as e:
            raise TempResourceError(f"Could not create temporary resource: {e}")

        self.path = Path(name)
        atexit.register(self.release)
        self._install_signal_handlers()

        try:
            with os.fdopen(fd, "wb") as f:
                f.write(self.content.encode("utf-8"))
        except OSError as e:
            self.release()
            raise TempResourceError(f"Could not create temporary resource: {e}")

        return self.path

    def release(self) -> None:
        """Remove the file. Safe to call more than once."""
        if self._released or self.path is None:
            return
        self._released = True

        self.path.unlink(missing_ok=True)
        atexit.unregister(self.release)
        self._restore_signal_handlers()

    def _install_signal_handlers(self) -> None:
        # signal.signal only works from the main thread; atexit still covers us
        if threading.current_thread() is not threading.main_thread():
            return
        for signum in _CLEANUP_SIGNALS:
            self._previous_handlers[signum] = signal.signal(signum, self._handle_signal)

    def _restore_signal_handlers(self) -> None:
        for signum, previous in self._previous_handlers.items():
            signal.signal(signum, previous if previous is not None else signal.SIG_DFL)
        self._previous_handlers = {}

    def _handle_signal(self, signum, frame) -> None:
        previous = self._previous_handlers.get(signum)
        self.release()

        if callable(previous):
            previous(signum, frame)
        elif previous is None or previous == signal.SIG_DFL:
            # Handlers are restored, so this terminates the process as usual
            os.kill(os.getpid(), signum)

    def __enter__(self) -> Path:
        return self.acquire()

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        self.release()
        return False
