"""Commit message shape checks.

The generated message is expected to look like:

    feat(auth): add token refresh on expiry

    - Refresh the access token when the API returns 401
    - Store the refresh token alongside the session

These checks only produce warnings; the message is used as generated.
"""

import re

MAX_SUBJECT_LENGTH = 72

BULLET_PREFIXES = ("- ", "* ", "• ")

CONVENTIONAL_SUBJECT_RE = re.compile(
    r"^(feat|fix|docs|refactor|perf|test|build|ci|chore|style|revert)"
    r"(\([^)]+\))?!?: \S"
)


def split_message(message: str) -> tuple[str, list[str]]:
    """Split a message into its subject line and remaining lines.

    Args:
        message: The commit message.

    Returns:
        (subject, rest) where rest keeps blank lines.
    """
    lines = message.strip("\n").split("\n")
    return lines[0], lines[1:]


def check_message_shape(message: str) -> list[str]:
    """Check a commit message against the expected Conventional Commit shape.

    Args:
        message: The commit message.

    Returns:
        A list of human-readable warnings. Empty if the shape looks right.
    """
    warnings = []
    subject, rest = split_message(message)

    if subject.lstrip().startswith(BULLET_PREFIXES):
        warnings.append("Subject line starts with a bullet")
    elif not CONVENTIONAL_SUBJECT_RE.match(subject):
        warnings.append("Subject line is not in 'type(scope): description' form")

    if len(subject) > MAX_SUBJECT_LENGTH:
        warnings.append(
            f"Subject line is {len(subject)} characters (recommended <= {MAX_SUBJECT_LENGTH})"
        )

    if not rest:
        warnings.append("Message has no body")
        return warnings

    if rest[0].strip():
        warnings.append("Missing blank line between subject and body")
        body = rest
    else:
        body = rest[1:]
        if body and not body[0].strip():
            warnings.append("More than one blank line between subject and body")

    body_lines = [line for line in body if line.strip()]
    # Continuation lines of a wrapped bullet are indented
    stray = [
        line for line in body_lines
        if not line.lstrip().startswith(BULLET_PREFIXES) and not line.startswith((" ", "\t"))
    ]
    if stray:
        warnings.append(f"{len(stray)} body line(s) are not bullet points")

    return warnings
