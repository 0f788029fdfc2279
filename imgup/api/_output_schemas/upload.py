"""Output schemas for upload commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class UploadFileOutput(BaseOutputSchema):
    """Output schema for upload file command."""

    success: bool = Field(..., description="Whether every file was uploaded")
    urls: list[str] = Field(..., description="Uploaded URLs aligned with the input files")
    embeds: list[str] = Field(..., description="Markdown image embeds, one per uploaded file")


register_output_schema("upload", "file", UploadFileOutput)
