"""Persistent record of uploaded images."""

import json
import logging
from contextlib import suppress
from datetime import datetime, timezone
from pathlib import Path

from pydantic import ValidationError

from ...utils.get_home_dir import get_home_dir
from ..link.ImageRef import ImageRef
from .LedgerEntry import LedgerEntry

logger = logging.getLogger(__name__)

LEDGER_FILENAME = "uploaded.json"


class UploadLedger:
    """JSON-file backed list of ``LedgerEntry`` records.

    Changes stay in memory until ``save`` is called.
    """

    def __init__(self, path: Path):
        self.path = Path(path)
        self._entries: list[LedgerEntry] = self._load()

    @staticmethod
    def default_path() -> Path:
        return get_home_dir() / LEDGER_FILENAME

    @classmethod
    def default(cls) -> "UploadLedger":
        """Ledger stored in the imgup home directory."""
        return cls(cls.default_path())

    def _load(self) -> list[LedgerEntry]:
        if not self.path.exists():
            return []
        try:
            with self.path.open(encoding="utf-8") as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in ledger file {self.path}: {e}") from e
        if not isinstance(raw, list):
            raise ValueError(f"Ledger file {self.path} must contain a JSON list")
        try:
            return [LedgerEntry(**item) for item in raw]
        except (TypeError, ValidationError) as e:
            raise ValueError(f"Invalid entry in ledger file {self.path}: {e}") from e

    @property
    def entries(self) -> list[LedgerEntry]:
        return list(self._entries)

    def record(self, images: list[ImageRef], urls: list[str]) -> list[LedgerEntry]:
        """Append one entry per uploaded image; ``urls`` is aligned with ``images``."""
        uploaded_at = datetime.now(timezone.utc).isoformat()
        added = [
            LedgerEntry(
                img_url=url,
                path=None if image.is_network else image.path,
                name=image.name,
                uploaded_at=uploaded_at,
            )
            for image, url in zip(images, urls)
        ]
        self._entries.extend(added)
        logger.debug("Recorded %d upload(s) in ledger", len(added))
        return added

    def forget_path(self, path: str) -> int:
        """Clear the local path of entries uploaded from ``path``; returns how many changed."""
        changed = 0
        for index, entry in enumerate(self._entries):
            if entry.path == path:
                self._entries[index] = entry.model_copy(update={"path": None})
                changed += 1
        return changed

    def find(self, img_url: str) -> LedgerEntry | None:
        return next((entry for entry in self._entries if entry.img_url == img_url), None)

    def remove(self, img_url: str) -> int:
        """Drop every entry for ``img_url``; returns how many were removed."""
        before = len(self._entries)
        self._entries = [entry for entry in self._entries if entry.img_url != img_url]
        return before - len(self._entries)

    def save(self) -> None:
        """Write the ledger atomically (temp file, then rename)."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            with temp_path.open("w", encoding="utf-8") as fh:
                json.dump([entry.model_dump(mode="json") for entry in self._entries], fh, indent=2)
            temp_path.replace(self.path)
        except OSError as e:
            with suppress(OSError):
                if temp_path.exists():
                    temp_path.unlink()
            raise RuntimeError(f"Failed to save ledger: {e}") from e
