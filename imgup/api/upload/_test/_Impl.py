"""Offline upload backend for dry runs and tests."""

import posixpath
from typing import Any
from urllib.parse import quote

from ...link.ImageRef import ImageRef
from .._AbstractBackend import _AbstractBackend
from ..UploadResult import UploadResult
from ._Data import _Data


class _Impl(_AbstractBackend):
    def __init__(self, data: _Data):
        if not isinstance(data, _Data):
            raise ValueError("Test uploader config data is required")
        self.data = data

    def upload(self, images: list[ImageRef]) -> UploadResult:
        urls = [self.data.base_url + quote(posixpath.basename(image.path)) for image in images]
        return UploadResult(success=True, result=urls)

    def delete(self, entries: list[dict[str, Any]]) -> bool:  # noqa: ARG002
        return True
