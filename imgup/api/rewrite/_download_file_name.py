"""Pick a local file name for a downloaded image (UNO: single function)."""

import mimetypes
import posixpath
import re
from urllib.parse import unquote, urlparse

from ..vault.is_image_type import is_image_type

_UNSAFE = re.compile(r'[\\:*?"<>|#^\[\]\s]+')


def _download_file_name(url: str, content_type: str) -> str | None:
    """Name the file after the last URL segment, with an image extension.

    The extension comes from the URL when it names an image, otherwise from
    ``content_type``. Returns None when neither identifies an image.
    """
    base = _UNSAFE.sub("_", unquote(posixpath.basename(urlparse(url).path))).strip("._")
    stem, ext = posixpath.splitext(base)
    if not is_image_type(base):
        stem = base
        ext = mimetypes.guess_extension(content_type.split(";")[0].strip().lower()) or ""
    name = f"{stem or 'image'}{ext}"
    return name if is_image_type(name) else None
