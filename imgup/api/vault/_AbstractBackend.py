"""Abstract base class for vault implementations."""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from pathlib import Path

from .Section import Section


class _AbstractBackend(ABC):
    """Abstract interface for a Vault implementation.

    Documents and files are addressed by vault-relative POSIX paths.
    """

    @property
    @abstractmethod
    def vault_path(self) -> Path:
        """Root directory of the vault."""
        pass

    @abstractmethod
    def iter_files(self) -> Iterator[str]:
        """Iterate over all files in the vault."""
        pass

    @abstractmethod
    def iter_notes(self) -> Iterator[str]:
        """Iterate over all markdown notes in the vault."""
        pass

    @abstractmethod
    def read_document(self, doc_id: str) -> str:
        pass

    @abstractmethod
    def write_document(self, doc_id: str, text: str) -> None:
        pass

    @abstractmethod
    def write_file(self, file_id: str, data: bytes) -> None:
        """Create or replace a binary file, creating missing folders."""
        pass

    @abstractmethod
    def get_sections(self, doc_id: str) -> list[Section]:
        """Structural sections of a note, ordered by offset."""
        pass

    @abstractmethod
    def get_forward_link_graph(self) -> dict[str, dict[str, int]]:
        """Map every note to the files it links to, with reference counts."""
        pass

    @abstractmethod
    def resolve_link(self, linkpath: str, from_doc: str) -> str | None:
        """Resolve a link path as written in ``from_doc`` to a vault file."""
        pass

    @abstractmethod
    def trash(self, doc_id: str) -> None:
        pass
