"""Config API module."""

from .ImgupConfig import ImgupConfig
from .LogConfig import LogConfig

__all__ = [
    "ImgupConfig",
    "LogConfig",
]
