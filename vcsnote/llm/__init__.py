"""Generation provider module for vcsnote.

This module provides a unified interface to the generation providers.
The active provider and model come from vcsnote/config.py.
"""

from typing import Optional

from vcsnote import config
from vcsnote.config import LLMProvider
from vcsnote.llm.base import (
    BaseLLMProvider,
    LLMResult,
    validate_generated_message,
)
from vcsnote.llm.exceptions import (
    EmptyGenerationError,
    GenerationServiceError,
    LLMError,
    MissingAPIKeyError,
)


def get_provider(
    provider: Optional[LLMProvider] = None,
    model: Optional[str] = None,
) -> BaseLLMProvider:
    """Get a provider instance.

    Args:
        provider: The provider to use. Defaults to ACTIVE_PROVIDER from config.
        model: The model to use. Defaults to ACTIVE_MODEL from config.

    Returns:
        An instance of the appropriate provider.

    Raises:
        ValueError: If the provider is not supported.
    """
    provider = provider or config.ACTIVE_PROVIDER
    model = model or config.ACTIVE_MODEL

    if provider == LLMProvider.LLM_CLI:
        from vcsnote.llm.cli_provider import LLMCliProvider

        return LLMCliProvider(model=model)

    elif provider == LLMProvider.ANTHROPIC:
        from vcsnote.llm.anthropic_provider import AnthropicProvider

        return AnthropicProvider(model=model)

    else:
        raise ValueError(f"Unsupported provider: {provider}")


def generate_commit_message(
    diff: str,
    model: Optional[str] = None,
    provider: Optional[LLMProvider] = None,
) -> LLMResult:
    """Generate a commit message for a diff.

    This is the main entry point for generation. It makes exactly one call to
    the provider; failures are not retried.

    Args:
        diff: The captured diff text.
        model: Model override. Defaults to the configured model.
        provider: Provider override. Defaults to the configured provider.

    Returns:
        An LLMResult whose message is non-empty and trimmed.

    Raises:
        GenerationServiceError: If the service call fails.
        EmptyGenerationError: If the result is empty.
        MissingAPIKeyError: If an API key is required and missing.
        LLMError: For other generation errors.
    """
    return get_provider(provider=provider, model=model).generate(diff)


__all__ = [
    "BaseLLMProvider",
    "LLMError",
    "MissingAPIKeyError",
    "GenerationServiceError",
    "EmptyGenerationError",
    "LLMResult",
    "get_provider",
    "generate_commit_message",
    "validate_generated_message",
]
