"""Vault path resolution utility.

Resolves user input paths to vault document ids with CWD-awareness:
- CWD inside vault: relative paths are relative to CWD within vault
- CWD outside vault: relative paths are relative to vault root
- Absolute paths in vault: converted to a vault-relative path
- Paths outside vault or non-existent: error
"""

import os
from pathlib import Path

from ...utils.normalize_path import normalize_path
from .VaultPathError import VaultPathError


def _collapse(path: Path) -> Path:
    return Path(os.path.normpath(path))


def resolve_vault_path(
    input_path: str,
    vault_path: Path,
    cwd: Path | None = None,
) -> str:
    """Resolve user input to a vault-relative POSIX path.

    Args:
        input_path: User input (relative or absolute path)
        vault_path: Absolute path to vault root directory
        cwd: Current working directory (defaults to Path.cwd())

    Returns:
        The document id, e.g. ``"assets/x.png"``

    Raises:
        VaultPathError: If path is outside vault or doesn't exist
    """
    vault_path = _collapse(normalize_path(vault_path))
    cwd = _collapse(normalize_path(cwd or Path.cwd()))

    if Path(input_path).expanduser().is_absolute():
        abs_path = _collapse(normalize_path(input_path))
    elif cwd.is_relative_to(vault_path):
        abs_path = _collapse(cwd / input_path)
    else:
        abs_path = _collapse(vault_path / input_path)

    if not abs_path.is_relative_to(vault_path):
        raise VaultPathError(f'"{input_path}" is not in the vault')
    doc_id = abs_path.relative_to(vault_path).as_posix()
    if not abs_path.is_file():
        raise VaultPathError(f'"{doc_id}" does not exist')
    return doc_id
