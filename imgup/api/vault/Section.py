"""Section model (UNO: single model)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Section:
    """A structural block of a note with absolute, half-open offsets."""

    type: str  # "paragraph", "code", "heading", "yaml", "blockquote", "list", "table"
    start_offset: int
    end_offset: int
