"""Offline backend configuration data."""

from pydantic import BaseModel, ConfigDict, Field


class _Data(BaseModel):
    """Offline uploader configuration.

    No network call is made; URLs are ``base_url`` plus the image file name.
    """

    model_config = ConfigDict(extra="forbid")

    base_url: str = Field("https://img.example.com/", description="Prefix for generated URLs")
