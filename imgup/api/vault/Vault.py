"""Vault public API."""

from collections.abc import Iterator
from pathlib import Path
from typing import Any

from ._AbstractBackend import _AbstractBackend
from .Section import Section
from .VaultConfig import VaultConfig


class Vault:
    """Facade for vault operations.

    Delegates to a concrete implementation based on configuration.
    Acts as a Context Manager to ensure proper resource handling.
    """

    def __init__(self, vault_config: VaultConfig):
        self.vault_config = vault_config
        self.type = vault_config.type
        self._impl: _AbstractBackend | None = None

    def __enter__(self) -> "Vault":
        backend_type = self.vault_config.type

        # Validate backend type using VaultConfig registry (single source of truth)
        from .VaultConfig import _BACKEND_REGISTRY

        if backend_type not in _BACKEND_REGISTRY:
            raise ValueError(f"Unsupported backend type: {backend_type!r} (supported: {list(_BACKEND_REGISTRY)})")

        # Pattern: imgup.api.vault._obsidian._Impl
        module = __import__(f"{_BACKEND_REGISTRY[backend_type]}._Impl", fromlist=[""])
        impl_class = module._Impl

        from ...utils.normalize_path import normalize_path

        vault_path = normalize_path(self.vault_config.base_dir)
        if not vault_path.is_dir():
            raise ValueError(f"Vault directory not found: {vault_path}")
        self._impl = impl_class(vault_path)
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self._impl = None

    @property
    def impl(self) -> _AbstractBackend:
        if not self._impl:
            raise RuntimeError("Vault not initialized (use 'with Vault(...)')")
        return self._impl

    @property
    def vault_path(self) -> Path:
        """Root directory of the vault."""
        return self.impl.vault_path

    def iter_files(self) -> Iterator[str]:
        return self.impl.iter_files()

    def iter_notes(self) -> Iterator[str]:
        return self.impl.iter_notes()

    def read_document(self, doc_id: str) -> str:
        return self.impl.read_document(doc_id)

    def write_document(self, doc_id: str, text: str) -> None:
        self.impl.write_document(doc_id, text)

    def write_file(self, file_id: str, data: bytes) -> None:
        self.impl.write_file(file_id, data)

    def get_sections(self, doc_id: str) -> list[Section]:
        return self.impl.get_sections(doc_id)

    def get_forward_link_graph(self) -> dict[str, dict[str, int]]:
        return self.impl.get_forward_link_graph()

    def resolve_link(self, linkpath: str, from_doc: str) -> str | None:
        return self.impl.resolve_link(linkpath, from_doc)

    def trash(self, doc_id: str) -> None:
        self.impl.trash(doc_id)
