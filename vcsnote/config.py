"""Configuration for vcsnote generation providers.

Configuration is loaded from ~/.vcsnote/config.yaml and VCSNOTE_* environment
variables (a .env file is honoured). Command-line flags override both.
"""

import os
from enum import Enum
from typing import Optional

from dotenv import load_dotenv


class LLMProvider(Enum):
    """Supported generation providers."""

    LLM_CLI = "llm"
    ANTHROPIC = "anthropic"


# ============================================================
# DEFAULT FALLBACK VALUES
# ============================================================
# These are used only if neither the config file nor the environment set them

DEFAULT_PROVIDER = LLMProvider.LLM_CLI
DEFAULT_MODELS = {
    LLMProvider.LLM_CLI: "gpt-4o-mini",
    LLMProvider.ANTHROPIC: "claude-sonnet-4-20250514",
}
DEFAULT_MODEL = DEFAULT_MODELS[DEFAULT_PROVIDER]
DEFAULT_MAX_TOKENS = 1024
DEFAULT_TEMPERATURE = 0.3


# ============================================================
# ENVIRONMENT VARIABLES
# ============================================================

ENV_PROVIDER = "VCSNOTE_PROVIDER"
ENV_MODEL = "VCSNOTE_MODEL"
ENV_TOOL = "VCSNOTE_TOOL"

API_KEY_ENV_VARS = {
    LLMProvider.ANTHROPIC: "ANTHROPIC_API_KEY",
}


# ============================================================
# ACTIVE CONFIGURATION (loaded from global config)
# ============================================================

# Initially set to defaults - will be overridden by load_config()
ACTIVE_PROVIDER = DEFAULT_PROVIDER
ACTIVE_MODEL = DEFAULT_MODEL
MAX_TOKENS = DEFAULT_MAX_TOKENS
TEMPERATURE = DEFAULT_TEMPERATURE
PREFERRED_TOOL: Optional[str] = None


def load_config() -> None:
    """Load configuration from the global config file and the environment.

    This should be called by the CLI before selecting a backend or provider.
    Precedence: environment > ~/.vcsnote/config.yaml > defaults.
    """
    global ACTIVE_PROVIDER, ACTIVE_MODEL, MAX_TOKENS, TEMPERATURE, PREFERRED_TOOL

    # Import here to avoid circular dependency
    from vcsnote import global_config

    load_dotenv()

    try:
        settings = global_config.load_global_config()
    except global_config.GlobalConfigError:
        # Unreadable config file: fall back to defaults
        settings = {}

    provider = global_config.get_active_provider(settings)
    model = global_config.get_active_model(settings)
    max_tokens = global_config.get_max_tokens(settings)
    temperature = global_config.get_temperature(settings)
    tool = global_config.get_preferred_tool(settings)

    env_provider = os.getenv(ENV_PROVIDER)
    if env_provider:
        try:
            provider = LLMProvider(env_provider.strip().lower())
        except ValueError:
            pass

    ACTIVE_PROVIDER = provider or DEFAULT_PROVIDER
    ACTIVE_MODEL = os.getenv(ENV_MODEL) or model or DEFAULT_MODELS[ACTIVE_PROVIDER]
    MAX_TOKENS = max_tokens if max_tokens is not None else DEFAULT_MAX_TOKENS
    TEMPERATURE = temperature if temperature is not None else DEFAULT_TEMPERATURE
    PREFERRED_TOOL = os.getenv(ENV_TOOL) or tool


def get_api_key_env_var(provider: LLMProvider) -> str:
    """Get the environment variable name for the API key.

    Args:
        provider: The LLM provider.

    Returns:
        The environment variable name.

    Raises:
        KeyError: If the provider does not use an API key.
    """
    return API_KEY_ENV_VARS[provider]
