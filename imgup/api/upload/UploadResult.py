"""UploadResult model (UNO: single model)."""

from dataclasses import dataclass, field


@dataclass
class UploadResult:
    """Outcome of one bulk upload.

    ``result`` holds the uploaded URLs positionally aligned with the request.
    """

    success: bool
    result: list[str] = field(default_factory=list)
    msg: str = ""
