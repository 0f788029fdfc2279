"""Output schemas for all API commands.

Importing this package registers every schema with the registry.
"""

from . import config, ledger, rewrite, upload
from ._base import BaseOutputSchema
from ._registry import get_output_schema, register_output_schema

__all__ = [
    "BaseOutputSchema",
    "config",
    "get_output_schema",
    "ledger",
    "register_output_schema",
    "rewrite",
    "upload",
]
