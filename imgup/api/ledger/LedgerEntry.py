"""LedgerEntry model (UNO: single model)."""

from pydantic import BaseModel, ConfigDict, Field


class LedgerEntry(BaseModel):
    """One uploaded image as recorded in the ledger."""

    model_config = ConfigDict(extra="forbid")

    img_url: str = Field(..., description="URL returned by the image host")
    path: str | None = Field(None, description="Local path the image was uploaded from, None once trashed")
    name: str = Field("", description="File name at upload time")
    uploaded_at: str = Field(..., description="ISO 8601 UTC timestamp")
