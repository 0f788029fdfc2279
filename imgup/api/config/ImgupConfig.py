"""Top-level imgup configuration."""

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ...utils.get_home_dir import get_home_dir
from ..rewrite.RewriteConfig import RewriteConfig
from ..upload.UploaderConfig import UploaderConfig
from ..vault.VaultConfig import VaultConfig
from .LogConfig import LogConfig


class ImgupConfig(BaseModel):
    """Top-level configuration for imgup layers."""

    model_config = ConfigDict(extra="forbid")

    vault: VaultConfig
    uploader: UploaderConfig
    rewrite: RewriteConfig = Field(default_factory=RewriteConfig)
    log: LogConfig = Field(default_factory=LogConfig)

    @classmethod
    def get_home_dir(cls) -> Path:
        """Get imgup home directory based on IMGUP_HOME or default to ~/.imgup."""
        return get_home_dir()

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to config file based on IMGUP_HOME or default to ~/.imgup."""
        return cls.get_home_dir() / "config.json"

    @classmethod
    def load(cls) -> "ImgupConfig":
        """Load and validate config from file.

        The vault and uploader sections are required; rewrite and log fall back to defaults.

        Raises:
            ValueError: If config file not found, invalid JSON, or validation error
        """
        path = cls.get_config_path()

        if not path.exists():
            raise ValueError(f"Configuration file not found at {path}")

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": ()}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e

    def to_dict(self) -> dict[str, Any]:
        """Convert ImgupConfig instance to a dictionary for serialization."""
        return {
            "vault": self.vault.model_dump(),
            "uploader": self.uploader.model_dump(),
            "rewrite": self.rewrite.model_dump(),
            "log": self.log.model_dump(),
        }
