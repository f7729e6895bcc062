"""
TCP transport - stream-socket binder and client.
"""

import logging
import socket

logger = logging.getLogger(__name__)


class TcpBinder:
    """Accepts incoming connections on a TCP host/port."""

    def __init__(self, host: str, port: int):
        self.host = host
        self.port = port
        self._socket: socket.socket | None = None

    def __repr__(self) -> str:
        return f"TcpBinder({self.host!r}, {self.port})"

    @property
    def address(self) -> tuple[str, int]:
        """Bound address once listening, else the configured one."""
        if self._socket is not None:
            return self._socket.getsockname()[:2]
        return (self.host, self.port)

    def bind(self) -> None:
        self._socket = socket.create_server((self.host, self.port))
        logger.info(f"listening on tcp://{self.address[0]}:{self.address[1]}")

    def close(self) -> None:
        if self._socket is not None:
            self._socket.close()
            self._socket = None


class TcpClient:
    """Connects to a TCP host/port."""

    def __init__(self, host: str, port: int):
        self.host = host
        self.port = port

    def __repr__(self) -> str:
        return f"TcpClient({self.host!r}, {self.port})"

    def connect(self, timeout: float = 5.0) -> socket.socket:
        return socket.create_connection((self.host, self.port), timeout=timeout)
