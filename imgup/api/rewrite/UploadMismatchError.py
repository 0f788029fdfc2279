"""Upload count mismatch error."""


class UploadMismatchError(Exception):
    """Raised when the uploader returns a different number of URLs than files sent."""

    def __init__(self, expected: int, received: int):
        self.expected = expected
        self.received = received
        super().__init__(f"Upload returned {received} URL(s) for {expected} file(s)")
