"""CLI entry point for vcsnote.

This module provides the main CLI application that combines the default
generate command and the config subcommands into a single interface.
"""

import typer

from vcsnote.cli.config import config_app
from vcsnote.cli.main import main_command

# Main application
app = typer.Typer(
    name="vcsnote",
    help="vcsnote: AI-generated Conventional Commit messages for Jujutsu and Git",
    add_completion=False,
)

# Add subcommand groups
app.add_typer(config_app, name="config")

# Set the main callback for default behavior (includes --version flag)
app.callback(invoke_without_command=True)(main_command)


__all__ = [
    "app",
    "config_app",
    "main_command",
]
