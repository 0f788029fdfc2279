"""Output schemas for ledger commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class LedgerListOutput(BaseOutputSchema):
    """Output schema for ledger list command."""

    entries: list[dict[str, Any]] = Field(..., description="Recorded uploads")
    count: int = Field(..., description="Number of entries")
    ledger_path: str = Field(..., description="Path to the ledger file")


class LedgerDeleteOutput(BaseOutputSchema):
    """Output schema for ledger delete command."""

    success: bool = Field(..., description="Whether the remote image was deleted")
    img_url: str = Field(..., description="URL that was requested for deletion")
    removed: bool = Field(..., description="Whether the ledger entry was removed")


register_output_schema("ledger", "list", LedgerListOutput)
register_output_schema("ledger", "delete", LedgerDeleteOutput)
