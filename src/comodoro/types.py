"""
Shared domain types for comodoro.

Enums provide exhaustiveness checking and prevent stringly-typed errors.
"""

from dataclasses import dataclass
from enum import Enum


class TimerCycle(Enum):
    """Named phase of the repeating work/break pattern."""

    FIRST_WORK = "first-work"
    FIRST_SHORT_BREAK = "first-short-break"
    SECOND_WORK = "second-work"
    SECOND_SHORT_BREAK = "second-short-break"
    LONG_BREAK = "long-break"


class ServerEvent(Enum):
    """Lifecycle of the hosting server process."""

    STARTED = "started"
    STOPPING = "stopping"
    STOPPED = "stopped"


class TimerEventKind(Enum):
    """Timer state transitions."""

    STARTED = "started"
    STOPPED = "stopped"
    BEGAN = "began"
    RUNNING = "running"
    PAUSED = "paused"
    RESUMED = "resumed"
    ENDED = "ended"

    @property
    def has_cycle(self) -> bool:
        return self not in (TimerEventKind.STARTED, TimerEventKind.STOPPED)


@dataclass(frozen=True)
class TimerEvent:
    """A timer transition, carrying the active cycle where relevant."""

    kind: TimerEventKind
    cycle: TimerCycle | None = None

    def __post_init__(self) -> None:
        if self.kind.has_cycle and self.cycle is None:
            raise ValueError(f"timer event {self.kind.value!r} requires a cycle")
        if not self.kind.has_cycle and self.cycle is not None:
            raise ValueError(f"timer event {self.kind.value!r} takes no cycle")

    def __str__(self) -> str:
        if self.cycle is None:
            return self.kind.value
        return f"{self.kind.value}({self.cycle.value})"

    @classmethod
    def started(cls) -> "TimerEvent":
        return cls(TimerEventKind.STARTED)

    @classmethod
    def stopped(cls) -> "TimerEvent":
        return cls(TimerEventKind.STOPPED)

    @classmethod
    def began(cls, cycle: TimerCycle) -> "TimerEvent":
        return cls(TimerEventKind.BEGAN, cycle)

    @classmethod
    def running(cls, cycle: TimerCycle) -> "TimerEvent":
        return cls(TimerEventKind.RUNNING, cycle)

    @classmethod
    def paused(cls, cycle: TimerCycle) -> "TimerEvent":
        return cls(TimerEventKind.PAUSED, cycle)

    @classmethod
    def resumed(cls, cycle: TimerCycle) -> "TimerEvent":
        return cls(TimerEventKind.RESUMED, cycle)

    @classmethod
    def ended(cls, cycle: TimerCycle) -> "TimerEvent":
        return cls(TimerEventKind.ENDED, cycle)

    @classmethod
    def parse(cls, kind: str, cycle: str | None = None) -> "TimerEvent":
        """
        Build an event from user-supplied names, e.g. ("began", "first-work").

        Names are matched case-insensitively; underscores and dashes are
        interchangeable.
        """
        event_kind = _lookup(TimerEventKind, kind, "timer event")
        event_cycle = _lookup(TimerCycle, cycle, "timer cycle") if cycle else None
        return cls(event_kind, event_cycle)


def _lookup(enum_cls, name: str, label: str):
    normalized = name.strip().lower().replace("_", "-")
    for member in enum_cls:
        if member.value == normalized:
            return member
    raise ValueError(f"invalid {label} {name!r}")
