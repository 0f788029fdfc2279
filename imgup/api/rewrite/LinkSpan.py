"""LinkSpan model (UNO: single model)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LinkSpan:
    """A replaceable reference to one target inside one note.

    Offsets are half-open and absolute into the content the span was scanned from.
    """

    target_id: str
    display_name: str
    start_offset: int
    end_offset: int
