"""
Comodoro configuration management.

Handles reading/writing the JSON configuration file holding hook commands
and per-protocol addressing sections.
"""

import json
import logging
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Iterator

from comodoro.errors import ConfigError
from comodoro.paths import config_file, ensure_dirs

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HooksConfig:
    """
    One optional shell command per event variant.

    Generic hooks (work_*, short_break_*) run for both paired cycles,
    specific hooks (first_*, second_*) for exactly one of them.
    An unset hook means no action.
    """

    server_started_hook: str | None = None
    server_stopping_hook: str | None = None
    server_stopped_hook: str | None = None

    timer_started_hook: str | None = None
    timer_stopped_hook: str | None = None

    work_began_hook: str | None = None
    work_running_hook: str | None = None
    work_paused_hook: str | None = None
    work_resumed_hook: str | None = None
    work_ended_hook: str | None = None

    first_work_began_hook: str | None = None
    first_work_running_hook: str | None = None
    first_work_paused_hook: str | None = None
    first_work_resumed_hook: str | None = None
    first_work_ended_hook: str | None = None

    second_work_began_hook: str | None = None
    second_work_running_hook: str | None = None
    second_work_paused_hook: str | None = None
    second_work_resumed_hook: str | None = None
    second_work_ended_hook: str | None = None

    short_break_began_hook: str | None = None
    short_break_running_hook: str | None = None
    short_break_paused_hook: str | None = None
    short_break_resumed_hook: str | None = None
    short_break_ended_hook: str | None = None

    first_short_break_began_hook: str | None = None
    first_short_break_running_hook: str | None = None
    first_short_break_paused_hook: str | None = None
    first_short_break_resumed_hook: str | None = None
    first_short_break_ended_hook: str | None = None

    second_short_break_began_hook: str | None = None
    second_short_break_running_hook: str | None = None
    second_short_break_paused_hook: str | None = None
    second_short_break_resumed_hook: str | None = None
    second_short_break_ended_hook: str | None = None

    long_break_began_hook: str | None = None
    long_break_running_hook: str | None = None
    long_break_paused_hook: str | None = None
    long_break_resumed_hook: str | None = None
    long_break_ended_hook: str | None = None

    @classmethod
    def field_names(cls) -> list[str]:
        return [f.name for f in fields(cls)]

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "HooksConfig":
        """Build from kebab-case keys, e.g. {"work-began-hook": "notify-send work"}."""
        known = set(cls.field_names())
        values = {}

        for key, command in data.items():
            name = key.replace("-", "_")
            if name not in known:
                logger.warning(f"ignoring unknown hook {key!r}")
                continue
            if command is not None and not isinstance(command, str):
                raise ConfigError(f"hook {key!r} must be a string, got {type(command).__name__}")
            values[name] = command

        return cls(**values)

    def to_dict(self) -> dict[str, str]:
        """Serialize set hooks to kebab-case keys."""
        return {name.replace("_", "-"): command for name, command in self.configured()}

    def configured(self) -> Iterator[tuple[str, str]]:
        """Yield (field name, command) for every set hook, in declaration order."""
        for name in self.field_names():
            command = getattr(self, name)
            if command is not None:
                yield name, command


@dataclass(frozen=True)
class TcpConfig:
    """Addressing section for the TCP transport."""

    host: str
    port: int

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TcpConfig":
        host = data.get("host")
        port = data.get("port")

        if not isinstance(host, str) or not host:
            raise ConfigError("tcp config requires a non-empty 'host'")
        # bool is an int subclass
        if not isinstance(port, int) or isinstance(port, bool) or not 0 <= port <= 65535:
            raise ConfigError(f"tcp config requires a 'port' between 0 and 65535, got {port!r}")

        return cls(host=host, port=port)

    def to_dict(self) -> dict[str, Any]:
        return {"host": self.host, "port": self.port}


@dataclass(frozen=True)
class Config:
    """Top-level configuration."""

    hooks: HooksConfig = field(default_factory=HooksConfig)
    tcp: TcpConfig | None = None

    def section(self, protocol) -> Any | None:
        """Return the addressing section for a protocol, or None if absent."""
        return getattr(self, protocol.value, None) if protocol.value in _SECTIONS else None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Config":
        if not isinstance(data, dict):
            raise ConfigError("configuration root must be an object")

        hooks = data.get("hooks") or {}
        if not isinstance(hooks, dict):
            raise ConfigError("'hooks' must be an object")

        tcp = data.get("tcp")
        if tcp is not None and not isinstance(tcp, dict):
            raise ConfigError("'tcp' must be an object")

        return cls(
            hooks=HooksConfig.from_dict(hooks),
            tcp=TcpConfig.from_dict(tcp) if tcp is not None else None,
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"hooks": self.hooks.to_dict()}
        if self.tcp is not None:
            data["tcp"] = self.tcp.to_dict()
        return data


# Config attributes that are protocol addressing sections
_SECTIONS = frozenset({"tcp"})


def load_config(path: Path | None = None) -> Config:
    """Load the configuration file, returning an empty config if it doesn't exist."""
    path = path or config_file()
    if not path.exists():
        logger.debug(f"no configuration at {path}, using defaults")
        return Config()

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ConfigError(f"cannot parse {path}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"cannot read {path}: {e}") from e

    logger.debug(f"loaded configuration from {path}")
    return Config.from_dict(data)


def save_config(config: Config, path: Path | None = None) -> None:
    """Save the configuration file."""
    path = path or config_file()
    ensure_dirs(path)
    path.write_text(json.dumps(config.to_dict(), indent=2) + "\n", encoding="utf-8")
