"""Upload API module."""

from .Uploader import Uploader
from .UploaderConfig import UploaderConfig
from .UploadResult import UploadResult

__all__ = [
    "UploadResult",
    "Uploader",
    "UploaderConfig",
]
