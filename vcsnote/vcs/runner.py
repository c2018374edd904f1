"""Command runner for the jj and git executables.

Contains:
- run_tool: Run an external tool and return the completed process
- _run_command: Run a tool and return its stdout, raising on failure
- _run_jj_command: Run a jj command and return its output
"""

import subprocess
import sys

from vcsnote.errors import COMMAND_NOT_FOUND
from vcsnote.vcs.exceptions import VCSCommandError


def run_tool(
    tool: str,
    args: list[str],
    interactive: bool = False,
) -> subprocess.CompletedProcess:
    """Run an external tool and wait for it to finish.

    Non-interactive runs capture stdout and stderr as text. Interactive runs
    (editor sessions) inherit the terminal's stdin but send the child's stdout
    to our stderr, so stdout only ever carries the generated message.

    Args:
        tool: Executable name (e.g. "git", "jj").
        args: Arguments passed to the executable.
        interactive: Whether the child needs the terminal.

    Returns:
        The completed process. The return code is not checked.

    Raises:
        VCSCommandError: If the executable cannot be found.
    """
    cmd = [tool] + args
    try:
        if interactive:
            return subprocess.run(cmd, stdout=sys.stderr, check=False)
        return subprocess.run(cmd, capture_output=True, text=True, check=False)
    except FileNotFoundError:
        raise VCSCommandError(
            f"{tool} is not installed or not in PATH.",
            exit_code=COMMAND_NOT_FOUND,
            command=cmd,
        )


def _run_command(tool: str, args: list[str], strip: bool = True) -> str:
    """Run a tool and return its stdout.

    Args:
        tool: Executable name.
        args: Arguments passed to the executable.
        strip: Whether to strip surrounding whitespace from the output.

    Returns:
        The stdout of the command.

    Raises:
        VCSCommandError: If the command fails, carrying its exit code.
    """
    result = run_tool(tool, args)
    if result.returncode != 0:
        stderr = (result.stderr or "").strip()
        raise VCSCommandError(
            f"Command failed: {tool} {' '.join(args)}\n{stderr}".rstrip(),
            exit_code=result.returncode,
            command=[tool] + args,
            stderr=stderr,
        )
    output = result.stdout or ""
    return output.strip() if strip else output


def _run_jj_command(args: list[str], strip: bool = True) -> str:
    """Run a jj command and return its output."""
    return _run_command("jj", args, strip=strip)
