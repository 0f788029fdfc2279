"""PicGo upload backend using the PicGo server HTTP API."""

import logging
from typing import Any

import requests  # type: ignore

from ...link.ImageRef import ImageRef
from .._AbstractBackend import _AbstractBackend
from ..UploadResult import UploadResult
from ._Data import _Data

logger = logging.getLogger(__name__)


class _Impl(_AbstractBackend):
    def __init__(self, data: _Data):
        if not isinstance(data, _Data):
            raise ValueError("PicGo config data is required")
        self.data = data

    def upload(self, images: list[ImageRef]) -> UploadResult:
        payload = {"list": [str(image.file) if image.file else image.path for image in images]}
        try:
            response = requests.post(self.data.upload_url, json=payload, timeout=self.data.timeout_secs)
            response.raise_for_status()
            body = response.json()
        except (requests.RequestException, ValueError) as exc:
            logger.error("PicGo upload request failed: %s", exc)
            return UploadResult(success=False, msg=str(exc))

        if not isinstance(body, dict):
            return UploadResult(success=False, msg=f"Unexpected PicGo response: {body!r}")
        return UploadResult(
            success=bool(body.get("success")),
            result=[str(url) for url in body.get("result") or []],
            msg=str(body.get("message") or body.get("msg") or ""),
        )

    def delete(self, entries: list[dict[str, Any]]) -> bool:
        try:
            payload = {"list": [{"imgUrl": entry["img_url"], "fileName": entry.get("name", "")} for entry in entries]}
            response = requests.post(self.data.delete_url, json=payload, timeout=self.data.timeout_secs)
            response.raise_for_status()
            body = response.json()
        except (requests.RequestException, ValueError) as exc:
            logger.error("PicList delete request failed: %s", exc)
            return False
        return isinstance(body, dict) and bool(body.get("success"))
