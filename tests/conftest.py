"""Shared test fixtures and configuration."""

import subprocess
import tempfile
from pathlib import Path

import pytest

from vcsnote import config


SAMPLE_DIFF = """diff --git a/auth.py b/auth.py
index 1234567..abcdefg 100644
--- a/auth.py
+++ b/auth.py
@@ -1,5 +1,8 @@
 def login(user):
-    return None
+    token = issue_token(user)
+    return token
+
+def refresh(token):
+    return issue_token(token.user)
"""

SAMPLE_MESSAGE = """feat(auth): add token refresh

- Return an issued token from login
- Add refresh helper that reissues tokens"""


class FakeTools:
    """Stand-in for the jj, git and llm executables.

    Responses are keyed by an argv prefix; the longest matching prefix wins.
    Unmatched commands succeed with empty output.
    """

    def __init__(self):
        self.installed = {"jj", "git", "llm"}
        self.responses = {}
        self.calls = []

    def set(self, *argv, returncode=0, stdout="", stderr="", side_effect=None):
        """Register the result for commands starting with argv."""
        self.responses[tuple(argv)] = (returncode, stdout, stderr, side_effect)

    def which(self, name, *args, **kwargs):
        return f"/usr/bin/{name}" if name in self.installed else None

    def run(self, cmd, *args, **kwargs):
        cmd = list(cmd)
        self.calls.append((cmd, kwargs))
        if cmd[0] not in self.installed:
            raise FileNotFoundError(cmd[0])

        best = None
        for prefix in self.responses:
            if tuple(cmd[: len(prefix)]) == prefix:
                if best is None or len(prefix) > len(best):
                    best = prefix

        if best is None:
            return subprocess.CompletedProcess(cmd, 0, "", "")

        returncode, stdout, stderr, side_effect = self.responses[best]
        if side_effect is not None:
            side_effect(cmd, **kwargs)
        return subprocess.CompletedProcess(cmd, returncode, stdout, stderr)

    def commands(self):
        """Return the argv of every call made so far."""
        return [cmd for cmd, _ in self.calls]

    def called(self, *prefix) -> bool:
        """Check whether any call started with the given argv prefix."""
        return any(tuple(cmd[: len(prefix)]) == prefix for cmd in self.commands())

    def find_call(self, *prefix):
        """Return (argv, kwargs) of the first call starting with prefix."""
        for cmd, kwargs in self.calls:
            if tuple(cmd[: len(prefix)]) == prefix:
                return cmd, kwargs
        raise AssertionError(f"No call starting with {prefix}")

    # Presets

    def jj_repo(self, summary="M auth.py", diff=SAMPLE_DIFF):
        self.set("jj", "root", stdout="/repo\n")
        self.set("jj", "diff", "--summary", stdout=summary)
        self.set("jj", "diff", "--git", stdout=diff)

    def git_repo(self, staged=True, diff=SAMPLE_DIFF):
        self.set("git", "rev-parse", "--is-inside-work-tree", stdout="true\n")
        self.set("git", "diff", "--cached", "--quiet", returncode=1 if staged else 0)
        self.set("git", "diff", "--cached", stdout=diff if staged else "")

    def no_jj_repo(self):
        self.set("jj", "root", returncode=1, stderr="Error: There is no jj repo in \".\"")

    def no_git_repo(self):
        self.set(
            "git", "rev-parse", "--is-inside-work-tree",
            returncode=128, stderr="fatal: not a git repository",
        )

    def llm_output(self, stdout=SAMPLE_MESSAGE, returncode=0, stderr=""):
        self.set("llm", stdout=stdout, returncode=returncode, stderr=stderr)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture(autouse=True)
def isolated_config(mocker, monkeypatch, temp_dir):
    """Keep tests away from the user's ~/.vcsnote, .env and VCSNOTE_* variables."""
    mocker.patch("vcsnote.global_config._CONFIG_DIR", temp_dir / ".vcsnote")
    mocker.patch("vcsnote.config.load_dotenv")
    for var in ("VCSNOTE_PROVIDER", "VCSNOTE_MODEL", "VCSNOTE_TOOL", "ANTHROPIC_API_KEY"):
        monkeypatch.delenv(var, raising=False)

    monkeypatch.setattr(config, "ACTIVE_PROVIDER", config.DEFAULT_PROVIDER)
    monkeypatch.setattr(config, "ACTIVE_MODEL", config.DEFAULT_MODEL)
    monkeypatch.setattr(config, "MAX_TOKENS", config.DEFAULT_MAX_TOKENS)
    monkeypatch.setattr(config, "TEMPERATURE", config.DEFAULT_TEMPERATURE)
    monkeypatch.setattr(config, "PREFERRED_TOOL", None)


@pytest.fixture
def fake_tools(mocker):
    """Route subprocess.run and shutil.which through a FakeTools instance."""
    tools = FakeTools()
    mocker.patch("subprocess.run", side_effect=tools.run)
    mocker.patch("shutil.which", side_effect=tools.which)
    return tools


@pytest.fixture
def sample_diff():
    """Sample diff text."""
    return SAMPLE_DIFF


@pytest.fixture
def sample_message():
    """Sample well-formed commit message."""
    return SAMPLE_MESSAGE
