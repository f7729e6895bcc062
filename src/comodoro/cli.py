"""
Main CLI entry point for comodoro.

Usage:
    comodoro server start [PROTOCOLS]...
    comodoro client check PROTOCOL
    comodoro hooks {list,run}
    comodoro config
"""

import typer
from rich.markup import escape

from comodoro.commands import client, hooks, server
from comodoro.commands.common import console
from comodoro.log import setup_logging
from comodoro.paths import config_file

app = typer.Typer(
    name="comodoro",
    help="Pomodoro timer server hooks and protocols",
    no_args_is_help=True,
)

# Register command groups
app.add_typer(server.app, name="server", help="Server commands")
app.add_typer(client.app, name="client", help="Client commands")
app.add_typer(hooks.app, name="hooks", help="Inspect and run hooks")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    setup_logging(verbose=verbose)


@app.command()
def config() -> None:
    """Show the configuration file."""
    path = config_file()

    if path.exists():
        console.print(f"\n[bold]Current configuration ({escape(str(path))}):[/bold]\n")
        console.print(path.read_text(), markup=False)
    else:
        console.print("\n[dim]No configuration file, using defaults.[/dim]")
        console.print(f"  Expected at: {path}\n", markup=False)


if __name__ == "__main__":
    app()
