"""Event sinks passed explicitly to storage components.

Components never write to a process-wide buffer. Each one takes an optional
``EventSink``; when none is given, events go to structlog through
``LoggingSink``. ``MemorySink`` keeps an ordered, observable record of events
for callers that display an activity log.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Callable, Optional, Protocol, runtime_checkable

from .observability import get_logger


class LogLevel(str, Enum):
    """Severity of a recorded event."""

    INFO = "INFO"
    ERROR = "ERROR"
    DEBUG = "DEBUG"
    NETWORK = "NETWORK"


@dataclass(frozen=True)
class LogEntry:
    """One recorded event."""

    timestamp: datetime
    level: LogLevel
    message: str
    data: dict[str, Any] = field(default_factory=dict)


@runtime_checkable
class EventSink(Protocol):
    """Receives events emitted by storage components."""

    def emit(self, level: LogLevel, message: str, **data: Any) -> None: ...


class LoggingSink:
    """Forwards events to a structlog logger."""

    def __init__(self, name: str = "bucketfs.events"):
        self._logger = get_logger(name)

    def emit(self, level: LogLevel, message: str, **data: Any) -> None:
        if level is LogLevel.ERROR:
            self._logger.error(message, **data)
        elif level is LogLevel.DEBUG:
            self._logger.debug(message, **data)
        elif level is LogLevel.NETWORK:
            self._logger.info(message, channel="network", **data)
        else:
            self._logger.info(message, **data)


Listener = Callable[[list[LogEntry]], None]


class MemorySink:
    """Records events in memory and notifies subscribers on every change."""

    def __init__(self, forward_to: Optional[EventSink] = None):
        self._entries: list[LogEntry] = []
        self._listeners: list[Listener] = []
        self._forward_to = forward_to

    @property
    def entries(self) -> list[LogEntry]:
        return list(self._entries)

    def emit(self, level: LogLevel, message: str, **data: Any) -> None:
        self._entries.append(
            LogEntry(
                timestamp=datetime.now(timezone.utc),
                level=level,
                message=message,
                data=data,
            )
        )
        if self._forward_to is not None:
            self._forward_to.emit(level, message, **data)
        self._notify()

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener, call it once with the current entries.

        Returns a callable that removes the listener.
        """
        self._listeners.append(listener)
        listener(self.entries)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def clear(self) -> None:
        self._entries = []
        self._notify()

    def _notify(self) -> None:
        snapshot = self.entries
        for listener in list(self._listeners):
            listener(snapshot)


def default_sink(sink: Optional[EventSink]) -> EventSink:
    """Return ``sink`` or a structlog-backed sink when none is given."""
    return sink if sink is not None else LoggingSink()
