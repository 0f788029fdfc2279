"""Upload ledger API."""

from .LedgerEntry import LedgerEntry
from .UploadLedger import UploadLedger

__all__ = ["LedgerEntry", "UploadLedger"]
