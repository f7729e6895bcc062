"""
Helpers shared by the CLI command groups.
"""

import typer
from rich.console import Console
from rich.markup import escape

from comodoro.config import Config, load_config
from comodoro.errors import ComodoroError

console = Console()


def fail(message: str) -> typer.Exit:
    """Print an error and return the Exit to raise."""
    console.print(f"[red]Error:[/red] {escape(message)}")
    return typer.Exit(1)


def load_config_or_exit() -> Config:
    """Load the configuration file, exiting with status 1 if it is invalid."""
    try:
        return load_config()
    except ComodoroError as e:
        raise fail(str(e))
