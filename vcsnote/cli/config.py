"""CLI commands for inspecting configuration."""

import os

import typer

from vcsnote import config, global_config
from vcsnote.config import LLMProvider, load_config

# Subcommand group for configuration
config_app = typer.Typer(
    name="config",
    help="Inspect vcsnote configuration (~/.vcsnote/config.yaml and VCSNOTE_* variables)",
    add_completion=False,
)


@config_app.command("show")
def config_show() -> None:
    """Show the effective configuration."""
    try:
        load_config()
        config_file = global_config.get_config_file_path()
        global_config.load_global_config()
    except global_config.GlobalConfigError as e:
        typer.echo(f"Error reading configuration: {e}", err=True)
        raise typer.Exit(1)

    if global_config.is_configured():
        typer.echo(f"Config file: {config_file}")
    else:
        typer.echo(f"Config file: {config_file} (not found, using defaults)")
    typer.echo()
    typer.echo(f"  Provider: {config.ACTIVE_PROVIDER.value}")
    typer.echo(f"  Model: {config.ACTIVE_MODEL}")
    typer.echo(f"  Max Tokens: {config.MAX_TOKENS}")
    typer.echo(f"  Temperature: {config.TEMPERATURE}")
    typer.echo(f"  Tool: {config.PREFERRED_TOOL or 'auto (jj, then git)'}")

    if config.ACTIVE_PROVIDER in config.API_KEY_ENV_VARS:
        env_var = config.get_api_key_env_var(config.ACTIVE_PROVIDER)
        status = "set" if os.getenv(env_var) else "not set"
        typer.echo(f"  API Key ({env_var}): {status}")


@config_app.command("list-providers")
def config_list_providers() -> None:
    """List available generation providers."""
    typer.echo("Available generation providers:")
    typer.echo()
    for provider in LLMProvider:
        typer.echo(f"  • {provider.value} (default model: {config.DEFAULT_MODELS[provider]})")
