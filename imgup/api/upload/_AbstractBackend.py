"""Abstract base class for upload backends."""

from abc import ABC, abstractmethod
from typing import Any

from ..link.ImageRef import ImageRef
from .UploadResult import UploadResult


class _AbstractBackend(ABC):
    @abstractmethod
    def upload(self, images: list[ImageRef]) -> UploadResult:
        """Upload every image in one request, URLs aligned with ``images``."""
        pass

    @abstractmethod
    def delete(self, entries: list[dict[str, Any]]) -> bool:
        """Delete previously uploaded images from the remote host."""
        pass
