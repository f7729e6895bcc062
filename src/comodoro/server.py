"""
Server host - the registration surface hook handlers attach to.

Owns the server lifecycle (start, stop) and forwards timer events
reported to it. Timer sequencing itself lives outside comodoro.
"""

import logging
import time
from typing import Any, Callable

from comodoro.types import ServerEvent, TimerEvent

logger = logging.getLogger(__name__)


class Server:
    """
    Binds transports and emits server lifecycle events.

    Usage:
        server = HookDispatcher(config.hooks).apply(Server(binders))
        server.serve_forever()
    """

    def __init__(self, binders: list[Any]):
        self.binders = binders
        self._server_handler: Callable[[ServerEvent], None] | None = None
        self._timer_handler: Callable[[TimerEvent], None] | None = None
        self.running = False

    def with_server_handler(self, handler: Callable[[ServerEvent], None]) -> "Server":
        self._server_handler = handler
        return self

    def with_timer_handler(self, handler: Callable[[TimerEvent], None]) -> "Server":
        self._timer_handler = handler
        return self

    def emit_server_event(self, event: ServerEvent) -> None:
        logger.debug(f"server event: {event.value}")
        if self._server_handler is not None:
            self._server_handler(event)

    def emit_timer_event(self, event: TimerEvent) -> None:
        logger.debug(f"timer event: {event}")
        if self._timer_handler is not None:
            self._timer_handler(event)

    def start(self) -> None:
        """Emit STARTED, then bind every transport."""
        self.emit_server_event(ServerEvent.STARTED)
        try:
            for binder in self.binders:
                binder.bind()
        except OSError:
            for binder in self.binders:
                binder.close()
            raise
        self.running = True

    def stop(self) -> None:
        """Emit STOPPING, release every transport, then emit STOPPED."""
        self.running = False
        try:
            self.emit_server_event(ServerEvent.STOPPING)
        finally:
            for binder in self.binders:
                binder.close()
        self.emit_server_event(ServerEvent.STOPPED)

    def serve_forever(self, poll_interval: float = 0.5) -> None:
        """Run until interrupted (Ctrl+C)."""
        self.start()
        try:
            while self.running:
                time.sleep(poll_interval)
        except KeyboardInterrupt:
            logger.info("interrupted, stopping server")
        finally:
            self.stop()
