"""Vault API module."""

from .is_image_type import is_image_type
from .resolve_vault_path import resolve_vault_path
from .Section import Section
from .Vault import Vault
from .VaultConfig import VaultConfig
from .VaultPathError import VaultPathError

__all__ = [
    "Section",
    "Vault",
    "VaultConfig",
    "VaultPathError",
    "is_image_type",
    "resolve_vault_path",
]
