"""Uploader public API."""

import logging
from typing import Any

from ..link.ImageRef import ImageRef
from ._AbstractBackend import _AbstractBackend
from .UploaderConfig import UploaderConfig
from .UploadResult import UploadResult

logger = logging.getLogger(__name__)


class Uploader:
    """Public API for image uploads.

    Imports the backend named by ``uploader_config.type`` from
    ``imgup.api.upload._<type>._Impl``.
    """

    def __init__(self, uploader_config: UploaderConfig):
        self.uploader_config = uploader_config
        module = __import__(f"imgup.api.upload._{uploader_config.type}._Impl", fromlist=[""])
        self._impl: _AbstractBackend = module._Impl(uploader_config.data)

    def upload(self, images: list[ImageRef]) -> UploadResult:
        logger.info("Uploading %d image(s) via %s", len(images), self.uploader_config.type)
        result = self._impl.upload(images)
        if not result.success:
            logger.error("Upload failed: %s", result.msg or "no message from backend")
        return result

    def delete(self, entries: list[dict[str, Any]]) -> bool:
        return self._impl.delete(entries)
