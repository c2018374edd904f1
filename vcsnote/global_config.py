"""Global configuration for vcsnote.

Reads user-level configuration from ~/.vcsnote/config.yaml:

    provider: llm          # or "anthropic"
    model: gpt-4o-mini
    max_tokens: 1024
    temperature: 0.3
    tool: jj               # preferred backend, optional

vcsnote never writes this file.
"""

from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from vcsnote.config import LLMProvider


class GlobalConfigError(Exception):
    """Raised when there's an error with global configuration."""
    pass


_CONFIG_DIR = Path.home() / ".vcsnote"


def get_global_config_dir() -> Path:
    """Get the global vcsnote configuration directory.

    Returns:
        Path to ~/.vcsnote/
    """
    return _CONFIG_DIR


def get_config_file_path() -> Path:
    """Get path to config.yaml file.

    Returns:
        Path to ~/.vcsnote/config.yaml
    """
    return get_global_config_dir() / "config.yaml"


def load_global_config() -> Dict[str, Any]:
    """Load global configuration from ~/.vcsnote/config.yaml.

    Returns:
        Dictionary with configuration values. Empty dict if file doesn't exist.

    Raises:
        GlobalConfigError: If the file cannot be read or is not a mapping.
    """
    config_file = get_config_file_path()

    if not config_file.exists():
        return {}

    try:
        with open(config_file, "r") as f:
            config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise GlobalConfigError(f"Failed to load config from {config_file}: {e}")

    if not isinstance(config, dict):
        raise GlobalConfigError(f"Config file {config_file} must contain a mapping")
    return config


def get_active_provider(config: Optional[Dict[str, Any]] = None) -> Optional[LLMProvider]:
    """Get the generation provider from global config.

    Args:
        config: An already loaded config mapping. Read from disk if omitted.

    Returns:
        LLMProvider enum value, or None if not configured or unknown.
    """
    config = load_global_config() if config is None else config
    provider_str = config.get("provider")

    if not provider_str:
        return None

    try:
        return LLMProvider(str(provider_str).lower())
    except ValueError:
        return None


def get_active_model(config: Optional[Dict[str, Any]] = None) -> Optional[str]:
    """Get the model from global config.

    Non-string YAML scalars such as `model: 4` are returned as text.
    """
    config = load_global_config() if config is None else config
    model = config.get("model")
    return str(model) if model is not None else None


def get_max_tokens(config: Optional[Dict[str, Any]] = None) -> Optional[int]:
    """Get max_tokens setting from global config."""
    config = load_global_config() if config is None else config
    return config.get("max_tokens")


def get_temperature(config: Optional[Dict[str, Any]] = None) -> Optional[float]:
    """Get temperature setting from global config."""
    config = load_global_config() if config is None else config
    return config.get("temperature")


def get_preferred_tool(config: Optional[Dict[str, Any]] = None) -> Optional[str]:
    """Get the preferred backend name (jj or git) from global config."""
    config = load_global_config() if config is None else config
    tool = config.get("tool")
    return str(tool) if tool else None


def is_configured() -> bool:
    """Check if a config file exists.

    Returns:
        True if config.yaml exists, False otherwise.
    """
    return get_config_file_path().exists()
