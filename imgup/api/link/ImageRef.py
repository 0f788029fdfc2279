"""ImageRef model (UNO: single model)."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ImageRef:
    """An upload candidate.

    ``path`` is a vault path or a network URL, ``source`` the literal snippet
    that referenced it and ``file`` the local file when there is one.
    """

    path: str
    name: str
    source: str
    file: Path | None = None

    @property
    def is_network(self) -> bool:
        return self.path.startswith(("http://", "https://"))
