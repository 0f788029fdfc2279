"""Output schemas for rewrite commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class RewriteFilesOutput(BaseOutputSchema):
    """Output schema for rewrite files (batch) command.

    Output structure:
    - targets: image files that entered the batch
    - url_map: target path -> uploaded URL, empty if the upload never completed
    - affected_document_count: number of notes written
    - conflicts: notes excluded because their image links overlap
    - deleted: local files moved to trash
    - aborted_reason: empty string unless the batch stopped early
    - log: append-only progress messages
    """

    success: bool = Field(..., description="Whether the batch completed")
    targets: list[str] = Field(..., description="Image files in the batch")
    url_map: dict[str, str] = Field(..., description="Target path to uploaded URL")
    affected_document_count: int = Field(..., description="Notes rewritten")
    conflicts: list[str] = Field(..., description="Notes excluded due to overlapping links")
    deleted: list[str] = Field(..., description="Local image files moved to trash")
    aborted_reason: str = Field(..., description="Why the batch aborted, empty if it did not")
    log: list[str] = Field(..., description="Progress messages in order")


class RewriteNoteOutput(BaseOutputSchema):
    """Output schema for rewrite note command."""

    success: bool = Field(..., description="Whether the note was rewritten")
    note: str = Field(..., description="Vault path of the note")
    images: list[dict[str, str]] = Field(..., description="Uploaded images with their new URLs")
    deleted: list[str] = Field(..., description="Local image files moved to trash")


class RewritePasteOutput(BaseOutputSchema):
    """Output schema for rewrite paste command."""

    success: bool = Field(..., description="Whether the text was rewritten")
    text: str = Field(..., description="Rewritten text")
    images: list[dict[str, str]] = Field(..., description="Uploaded network images with their new URLs")


class RewriteDownloadOutput(BaseOutputSchema):
    """Output schema for rewrite download command."""

    success: bool = Field(..., description="Whether the note was rewritten")
    note: str = Field(..., description="Vault path of the note")
    images: list[dict[str, str]] = Field(..., description="Downloaded URLs with the vault files they were saved to")


register_output_schema("rewrite", "files", RewriteFilesOutput)
register_output_schema("rewrite", "note", RewriteNoteOutput)
register_output_schema("rewrite", "paste", RewritePasteOutput)
register_output_schema("rewrite", "download", RewriteDownloadOutput)
