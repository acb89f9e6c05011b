"""Diagnostic context attached to every client error."""

from dataclasses import dataclass, field
from datetime import UTC, datetime


def _now() -> datetime:
    return datetime.now(UTC)


@dataclass(frozen=True)
class ErrorDebug:
    """Where and when an error was captured.

    Concurrent calls on one client can fail at the same moment; the
    operation name and capture timestamp let a caller or log aggregator
    tell them apart.
    """

    operation: str
    timestamp: datetime = field(default_factory=_now)

    @property
    def time_of_day(self) -> str:
        """Capture time formatted as ``hh:mm:ss.mmm``."""
        return self.timestamp.strftime("%H:%M:%S.") + f"{self.timestamp.microsecond // 1000:03d}"

    def to_dict(self) -> dict[str, str]:
        return {"timestamp": self.timestamp.isoformat(), "operation": self.operation}


def message_detail(message: str) -> dict[str, str]:
    """Wrap a plain message the way upstream error bodies are shaped."""
    return {"message": message}
