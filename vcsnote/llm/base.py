"""Base classes and shared utilities for generation providers."""

import os
from abc import ABC, abstractmethod
from dataclasses import dataclass

from vcsnote.llm.exceptions import EmptyGenerationError, MissingAPIKeyError
from vcsnote.llm.prompts import SYSTEM_PROMPT


@dataclass
class LLMResult:
    """Result from a generation call."""

    message: str
    model: str
    provider: str
    raw_response: str = ""
    input_chars: int = 0
    output_chars: int = 0


def validate_generated_message(raw_response: str) -> str:
    """Normalize a raw generation result into a usable message.

    Args:
        raw_response: The text returned by the provider.

    Returns:
        The message with surrounding whitespace removed.

    Raises:
        EmptyGenerationError: If nothing is left after trimming.
    """
    message = (raw_response or "").strip()
    if not message:
        raise EmptyGenerationError(
            "Empty generation result: the model returned no commit message."
        )
    return message


class BaseLLMProvider(ABC):
    """Abstract base class for generation providers."""

    #: Provider identifier as used in config files
    provider_name: str = ""

    def __init__(self, model: str):
        """Initialize the provider.

        Args:
            model: The model identifier to use.
        """
        self.model = model
        self.system_prompt = SYSTEM_PROMPT

    @abstractmethod
    def generate(self, diff: str) -> LLMResult:
        """Generate a commit message for a diff.

        Args:
            diff: The captured diff, sent verbatim as the only user content.

        Returns:
            An LLMResult with the validated message.

        Raises:
            GenerationServiceError: If the service call fails.
            EmptyGenerationError: If the result is empty.
            LLMError: For other generation errors.
        """
        pass

    def _get_api_key(self, env_var_name: str, provider_name: str) -> str:
        """Get an API key from the environment.

        Args:
            env_var_name: Environment variable name to check.
            provider_name: Human-readable provider name for error messages.

        Returns:
            The API key string.

        Raises:
            MissingAPIKeyError: If the API key is not found.
        """
        api_key = os.getenv(env_var_name)
        if api_key:
            return api_key

        raise MissingAPIKeyError(
            f"{provider_name} API key not found. Set it using:\n"
            f"  1. Environment variable: export {env_var_name}=your_key_here\n"
            f"  2. A .env file in the current directory containing {env_var_name}=..."
        )

    def _build_result(self, raw_response: str, diff: str) -> LLMResult:
        message = validate_generated_message(raw_response)
        return LLMResult(
            message=message,
            model=self.model,
            provider=self.provider_name,
            raw_response=raw_response,
            input_chars=len(diff),
            output_chars=len(message),
        )
