"""Collects link spans per note and validates them in one pass."""

from .LinkSpan import LinkSpan
from .SpanOverlapConflict import SpanOverlapConflict


class SpanBuilder:
    """Accumulates spans from every target, then sorts and checks each note.

    Call ``add`` while scanning and ``build`` once scanning is finished.
    """

    def __init__(self) -> None:
        self._spans: dict[str, list[LinkSpan]] = {}

    def add(self, doc_id: str, spans: list[LinkSpan]) -> None:
        if spans:
            self._spans.setdefault(doc_id, []).extend(spans)

    def build(self) -> tuple[dict[str, list[LinkSpan]], list[SpanOverlapConflict]]:
        """Return the valid span set and one conflict per overlapping note.

        Notes with a conflict are left out of the span set.
        """
        span_set: dict[str, list[LinkSpan]] = {}
        conflicts: list[SpanOverlapConflict] = []
        for doc_id, spans in self._spans.items():
            ordered = sorted(spans, key=lambda span: (span.start_offset, span.end_offset))
            overlap = next(
                (
                    (left, right)
                    for left, right in zip(ordered, ordered[1:])
                    if left.end_offset > right.start_offset
                ),
                None,
            )
            if overlap is not None:
                left, right = overlap
                conflicts.append(
                    SpanOverlapConflict(
                        doc_id,
                        f"Image link overlap detected in {doc_id} "
                        f"([{left.start_offset}, {left.end_offset}) and [{right.start_offset}, {right.end_offset}))",
                    )
                )
                continue
            span_set[doc_id] = ordered
        return span_set, conflicts
