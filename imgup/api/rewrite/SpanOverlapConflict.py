"""Overlapping link spans error."""


class SpanOverlapConflict(Exception):
    """Raised when two image links in the same note overlap."""

    def __init__(self, doc_id: str, message: str = ""):
        self.doc_id = doc_id
        super().__init__(message or f"Overlapping image links in {doc_id}")
