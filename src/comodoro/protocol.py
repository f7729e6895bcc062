"""
Protocol selection - pick the binders a server uses and the client a client uses.

Transports register constructors in BINDERS and CLIENTS. A protocol without
an entry is unavailable, the same as if its transport were not installed.
"""

import logging
from enum import Enum
from typing import Any, Callable

from comodoro.config import Config
from comodoro.errors import MissingConfigError, MissingProtocolError, ProtocolError
from comodoro.transport import TcpBinder, TcpClient

logger = logging.getLogger(__name__)

Factory = Callable[[str, int], Any]


class Protocol(Enum):
    """Transport kinds. NONE is the unselected default and never usable."""

    TCP = "tcp"
    NONE = "none"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def default(cls) -> "Protocol":
        return cls.NONE

    @classmethod
    def values(cls) -> list["Protocol"]:
        """Selectable protocols: available transports, never NONE."""
        return [p for p in cls if p is not cls.NONE and (p in BINDERS or p in CLIENTS)]

    @classmethod
    def parse(cls, text: str) -> "Protocol":
        """Parse a protocol name, ignoring case."""
        for protocol in cls.values():
            if protocol.value == text.lower():
                return protocol
        raise ValueError(f"invalid protocol {text}")


BINDERS: dict[Protocol, Factory] = {Protocol.TCP: TcpBinder}
CLIENTS: dict[Protocol, Factory] = {Protocol.TCP: TcpClient}


def register_binder(protocol: Protocol, factory: Factory) -> None:
    if protocol is Protocol.NONE:
        raise ValueError("cannot register a binder for the none protocol")
    BINDERS[protocol] = factory


def register_client(protocol: Protocol, factory: Factory) -> None:
    if protocol is Protocol.NONE:
        raise ValueError("cannot register a client for the none protocol")
    CLIENTS[protocol] = factory


def default_protocols() -> list[Protocol]:
    """Protocols a server binds when none are requested."""
    return [p for p in Protocol if p in BINDERS]


def to_binders(config: Config, protocols: list[Protocol]) -> list[Any]:
    """
    Build one binder per requested protocol.

    An empty request means default_protocols(). Protocols that are
    unavailable or have no config section are dropped silently. Duplicate
    requests collapse to their first occurrence.
    """
    requested = protocols or default_protocols()
    binders = []
    seen = set()

    for protocol in requested:
        if protocol in seen:
            continue
        seen.add(protocol)

        factory = BINDERS.get(protocol)
        section = config.section(protocol)
        if factory is None or section is None:
            logger.debug(f"skipping {protocol} binder: not available or not configured")
            continue

        binders.append(factory(section.host, section.port))

    return binders


def to_client(protocol: Protocol, config: Config) -> Any:
    """Build the client for exactly one protocol."""
    if protocol is Protocol.NONE:
        raise MissingProtocolError()

    factory = CLIENTS.get(protocol)
    if factory is None:
        raise ProtocolError(f"cannot build {protocol} client: protocol not available")

    section = config.section(protocol)
    if section is None:
        raise MissingConfigError(protocol)

    return factory(section.host, section.port)
