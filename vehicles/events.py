"""Event records and sinks for vehicle status messages."""

import sys
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, TextIO


class EventLevel(Enum):
    """Severity of a status message."""

    INFO = 1
    WARNING = 2  # Refused operation, state left unchanged


@dataclass
class Event:
    """A single status line emitted by a vehicle operation."""

    level: EventLevel
    message: str

    @property
    def is_warning(self) -> bool:
        return self.level == EventLevel.WARNING


class EventLog:
    """Sink that keeps every event in memory."""

    def __init__(self):
        self.events: List[Event] = []

    def emit(self, event: Event) -> None:
        self.events.append(event)

    @property
    def messages(self) -> List[str]:
        return [e.message for e in self.events]

    @property
    def warnings(self) -> List[str]:
        return [e.message for e in self.events if e.is_warning]

    def clear(self) -> None:
        self.events.clear()

    def __len__(self) -> int:
        return len(self.events)


class ConsoleSink:
    """Sink that prints each event as a line of text."""

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream

    def emit(self, event: Event) -> None:
        # Looked up per emit, not at construction
        stream = self._stream if self._stream is not None else sys.stdout
        if event.is_warning:
            print(f"Warning: {event.message}", file=stream)
        else:
            print(event.message, file=stream)
