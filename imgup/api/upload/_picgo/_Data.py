"""PicGo-specific configuration data."""

from pydantic import BaseModel, ConfigDict, Field


class _Data(BaseModel):
    """PicGo server configuration.

    PicGo and PicList expose the same local HTTP API; only PicList serves ``delete_url``.
    """

    model_config = ConfigDict(extra="forbid")

    upload_url: str = Field("http://127.0.0.1:36677/upload", description="PicGo upload endpoint")
    delete_url: str = Field("http://127.0.0.1:36677/delete", description="PicList delete endpoint")
    timeout_secs: float = Field(60.0, gt=0, description="HTTP timeout per request")
