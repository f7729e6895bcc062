"""
Hook dispatch - run configured shell commands on lifecycle events.

Each event resolves to an ordered list of hook fields: one for server and
whole-timer events, two for cycle transitions (the generic hook of the
cycle family, then the hook specific to the exact cycle). Long breaks
have no pair, so they resolve to a single hook.
"""

import logging
import os
import subprocess
import sys

from comodoro.config import HooksConfig
from comodoro.types import ServerEvent, TimerCycle, TimerEvent

logger = logging.getLogger(__name__)

# Hook field prefixes per cycle, generic first
CYCLE_SCOPES: dict[TimerCycle, tuple[str, ...]] = {
    TimerCycle.FIRST_WORK: ("work", "first_work"),
    TimerCycle.SECOND_WORK: ("work", "second_work"),
    TimerCycle.FIRST_SHORT_BREAK: ("short_break", "first_short_break"),
    TimerCycle.SECOND_SHORT_BREAK: ("short_break", "second_short_break"),
    TimerCycle.LONG_BREAK: ("long_break",),
}


def is_native_windows() -> bool:
    """True on Windows unless running under an MSYS2/MinGW environment."""
    return sys.platform == "win32" and not os.environ.get("MSYSTEM", "").startswith("MINGW")


def shell_argv(command: str) -> list[str]:
    """Wrap a command line for the host's command interpreter."""
    if is_native_windows():
        return ["cmd", "/C", command]
    return ["sh", "-c", command]


def run_hook(command: str | None) -> None:
    """
    Run a hook command through the shell and wait for it to exit.

    stdin is empty and stdout is discarded. A non-zero exit is logged,
    not raised. OSError propagates when the interpreter cannot be spawned.
    """
    if command is None:
        return

    logger.debug(f"running hook: {command}")

    result = subprocess.run(
        shell_argv(command),
        stdin=subprocess.DEVNULL,
        stdout=subprocess.DEVNULL,
        stderr=subprocess.PIPE,
    )

    # Negative return codes mean the child was killed by a signal: no exit code
    if result.returncode > 0:
        logger.warning(f"command {command!r} returned non-zero status exit code {result.returncode}")


def hook_fields(event: ServerEvent | TimerEvent) -> list[str]:
    """Resolve an event to the HooksConfig fields to run, in order."""
    if isinstance(event, ServerEvent):
        return [f"server_{event.value}_hook"]

    if event.cycle is None:
        return [f"timer_{event.kind.value}_hook"]

    return [f"{scope}_{event.kind.value}_hook" for scope in CYCLE_SCOPES[event.cycle]]


def resolve_hooks(config: HooksConfig, event: ServerEvent | TimerEvent) -> list[str | None]:
    """Return the commands configured for an event, in execution order."""
    return [getattr(config, name) for name in hook_fields(event)]


class HookDispatcher:
    """
    Runs the hooks of an immutable HooksConfig for incoming events.

    Usage:
        dispatcher = HookDispatcher(config.hooks)
        dispatcher.apply(server)
    """

    def __init__(self, config: HooksConfig):
        self.config = config

    def dispatch(self, event: ServerEvent | TimerEvent) -> None:
        """Run the hooks for an event. Stops at the first OSError."""
        for command in resolve_hooks(self.config, event):
            run_hook(command)

    def on_server_event(self, event: ServerEvent) -> None:
        self.dispatch(event)

    def on_timer_event(self, event: TimerEvent) -> None:
        self.dispatch(event)

    def apply(self, builder):
        """Register both handlers on a server builder and return it."""
        return builder.with_server_handler(self.on_server_event).with_timer_handler(
            self.on_timer_event
        )
