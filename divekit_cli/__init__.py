"""Command-line bootstrap for divekit working directories.

The command surface is implemented with Typer and Rich; status lines are
colored for humans while exit codes stay stable for scripts.
"""

__all__ = ["__version__"]

__version__ = "0.1.0"
