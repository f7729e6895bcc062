"""
Hooks CLI commands - inspect and trigger configured hooks.
"""

from typing import Optional

import typer
from rich.markup import escape
from rich.table import Table

from comodoro.commands.common import console, fail, load_config_or_exit
from comodoro.hooks import HookDispatcher, hook_fields
from comodoro.types import ServerEvent, TimerEvent

app = typer.Typer(no_args_is_help=True)


@app.command("list")
def list_hooks() -> None:
    """List all configured hooks."""
    config = load_config_or_exit()
    configured = list(config.hooks.configured())

    if not configured:
        console.print("[dim]No hooks configured.[/dim]")
        return

    table = Table(title="Configured Hooks")
    table.add_column("Hook", style="cyan")
    table.add_column("Command")

    for name, command in configured:
        table.add_row(name.replace("_", "-"), escape(command))

    console.print()
    console.print(table)
    console.print()


@app.command()
def run(
    event: str = typer.Argument(..., help="Event name (e.g., 'began', 'started')"),
    cycle: Optional[str] = typer.Argument(None, help="Timer cycle (e.g., 'first-work')"),
    server: bool = typer.Option(False, "--server", help="Treat EVENT as a server event"),
) -> None:
    """Run the hooks of a single event, as the server would."""
    try:
        if server:
            if cycle is not None:
                raise ValueError("server events take no cycle")
            parsed = ServerEvent(event.lower())
        else:
            parsed = TimerEvent.parse(event, cycle)
    except ValueError as e:
        raise fail(str(e))

    config = load_config_or_exit()
    names = hook_fields(parsed)

    try:
        HookDispatcher(config.hooks).dispatch(parsed)
    except OSError as e:
        raise fail(f"cannot run hook: {e}")

    label = parsed.value if server else str(parsed)
    hooks = ", ".join(name.replace("_", "-") for name in names)
    console.print(f"[green]✓[/green] Dispatched {escape(label)}: {hooks}")
