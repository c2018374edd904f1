"""Provider that shells out to the `llm` command-line tool."""

import subprocess

from vcsnote.config import LLMProvider
from vcsnote.errors import COMMAND_NOT_FOUND
from vcsnote.llm.base import BaseLLMProvider, LLMResult
from vcsnote.llm.exceptions import GenerationServiceError


class LLMCliProvider(BaseLLMProvider):
    """Generate messages with `llm --model <model> --system <prompt>`.

    The diff is written to the command's stdin; the message is read from its
    stdout. Authentication and model plugins are the `llm` tool's business.
    """

    provider_name = LLMProvider.LLM_CLI.value

    def __init__(self, model: str, executable: str = "llm"):
        super().__init__(model)
        self.executable = executable

    def build_command(self) -> list[str]:
        """Build the argv for the generation command."""
        return [
            self.executable,
            "--model",
            self.model,
            "--system",
            self.system_prompt,
        ]

    def generate(self, diff: str) -> LLMResult:
        """Generate a commit message by running the `llm` tool.

        Raises:
            GenerationServiceError: If the command is missing or exits non-zero.
            EmptyGenerationError: If it prints nothing but whitespace.
        """
        try:
            result = subprocess.run(
                self.build_command(),
                input=diff,
                capture_output=True,
                text=True,
                check=False,
            )
        except FileNotFoundError:
            raise GenerationServiceError(
                f"Generation service error: '{self.executable}' is not installed or not in PATH.",
                exit_code=COMMAND_NOT_FOUND,
            )

        if result.returncode != 0:
            stderr = (result.stderr or "").strip()
            raise GenerationServiceError(
                f"Generation service error: {self.executable} exited with code "
                f"{result.returncode}.\n{stderr}".rstrip(),
                exit_code=result.returncode,
                stderr=stderr,
            )

        return self._build_result(result.stdout or "", diff)
