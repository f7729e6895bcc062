"""
Client CLI commands - check connectivity to a timer server.
"""

import typer

from comodoro.commands.common import console, fail, load_config_or_exit
from comodoro.errors import ProtocolError
from comodoro.protocol import Protocol, to_client

app = typer.Typer(no_args_is_help=True)


@app.command()
def check(
    protocol: str = typer.Argument(..., help="Protocol used to reach the server (e.g., 'tcp')"),
    timeout: float = typer.Option(5.0, "--timeout", "-t", help="Connection timeout in seconds"),
) -> None:
    """Connect to the server once and report whether it is reachable."""
    try:
        selected = Protocol.parse(protocol)
    except ValueError as e:
        raise fail(str(e))

    config = load_config_or_exit()

    try:
        client = to_client(selected, config)
    except ProtocolError as e:
        raise fail(str(e))

    try:
        connection = client.connect(timeout=timeout)
    except OSError as e:
        raise fail(f"cannot reach server with {selected}: {e}")
    connection.close()

    console.print(f"[green]✓[/green] Server reachable over {selected}")
