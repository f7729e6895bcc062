"""
Server CLI commands - start the timer server.
"""

from typing import List, Optional

import typer

from comodoro.commands.common import console, fail, load_config_or_exit
from comodoro.hooks import HookDispatcher
from comodoro.protocol import Protocol, to_binders
from comodoro.server import Server

app = typer.Typer(no_args_is_help=True)


def parse_protocols(values: Optional[List[str]]) -> list[Protocol]:
    """Validate protocol names against the available protocols."""
    protocols = []
    for value in values or []:
        try:
            protocols.append(Protocol.parse(value))
        except ValueError as e:
            choices = ", ".join(str(p) for p in Protocol.values()) or "none available"
            raise typer.BadParameter(f"{e} (choose from: {choices})")
    return protocols


@app.command()
def start(
    protocols: Optional[List[str]] = typer.Argument(
        None,
        help="Protocols the server should use to accept requests (default: all available)",
    ),
) -> None:
    """Start the timer server."""
    requested = parse_protocols(protocols)
    config = load_config_or_exit()
    binders = to_binders(config, requested)

    if not binders:
        raise fail("no protocol could be bound, check the configuration of the requested protocols")

    server = HookDispatcher(config.hooks).apply(Server(binders))

    console.print("[green]✓[/green] Server starting (Ctrl+C to stop)")
    try:
        server.serve_forever()
    except OSError as e:
        raise fail(f"server failed: {e}")
    console.print("[dim]○[/dim] Server stopped")
