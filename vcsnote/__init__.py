"""AI commit message generator for Jujutsu and Git working trees."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("vcsnote")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"
