"""Result value returned by every metric collector."""
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    UNREADABLE = "unreadable"  # source missing or cannot be opened
    MALFORMED = "malformed"  # content cannot be parsed
    INVALID = "invalid"  # parsed, but the aggregate makes no sense


class Level(Enum):
    OK = "OK"
    WARN = "WARN"
    ERROR = "ERROR"


@dataclass(frozen=True)
class MetricResult:
    """Formatted metric text, tagged with an optional error kind and a severity."""
    text: str
    error: Optional[ErrorKind] = None
    level: Level = Level.OK

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def failed(cls, text: str, error: ErrorKind) -> "MetricResult":
        """Build an error result; its inline marker is the published text."""
        return cls(text=text, error=error, level=Level.ERROR)

    def __str__(self) -> str:
        return self.text


def level_for(value: int, warn: int, error: int) -> Level:
    """Classify a percentage-like value against warn/error breakpoints."""
    if value >= error:
        return Level.ERROR
    if value >= warn:
        return Level.WARN
    return Level.OK
