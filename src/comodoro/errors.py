"""
Error types raised by comodoro.

Hook spawn failures are not listed here: they surface as the built-in
OSError raised by subprocess.
"""


class ComodoroError(Exception):
    """Base class for comodoro errors."""


class ConfigError(ComodoroError):
    """The persisted configuration is invalid."""


class ProtocolError(ComodoroError):
    """A binder or client could not be built."""


class MissingProtocolError(ProtocolError):
    def __init__(self) -> None:
        super().__init__("cannot build client: missing protocol")


class MissingConfigError(ProtocolError):
    """The configuration has no section for the requested protocol."""

    def __init__(self, protocol) -> None:
        self.protocol = protocol
        super().__init__(f"cannot build {protocol} client: missing {protocol} config")
