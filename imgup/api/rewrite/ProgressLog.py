"""Append-only progress history of a batch."""

from collections.abc import Iterator
from dataclasses import dataclass

from .BatchStage import BatchStage


@dataclass(frozen=True)
class ProgressEvent:
    stage: BatchStage
    message: str


class ProgressLog:
    """Ordered record of stage messages; entries are never removed or changed."""

    def __init__(self) -> None:
        self._events: list[ProgressEvent] = []

    def append(self, stage: BatchStage, message: str) -> ProgressEvent:
        event = ProgressEvent(stage, message)
        self._events.append(event)
        return event

    @property
    def events(self) -> tuple[ProgressEvent, ...]:
        return tuple(self._events)

    def messages(self) -> list[str]:
        return [event.message for event in self._events]

    def __iter__(self) -> Iterator[ProgressEvent]:
        return iter(tuple(self._events))

    def __len__(self) -> int:
        return len(self._events)
