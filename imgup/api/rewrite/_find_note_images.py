"""Map image references of a note to vault files (UNO: single function)."""

from __future__ import annotations

import posixpath
from typing import TYPE_CHECKING

from ..link.ImageRef import ImageRef
from ..vault.is_image_type import is_image_type

if TYPE_CHECKING:
    from ..vault.Vault import Vault


def _find_note_images(vault: Vault, note_id: str, refs: list[ImageRef]) -> list[ImageRef]:
    """Attach a vault file to every local reference that names an image.

    A local path is looked up as a vault path first, then relative to the note
    when it starts with ``./`` or ``../``, then by file name (shortest path wins).
    Network references pass through unchanged; unmatched ones are dropped.
    """
    files = list(vault.iter_files())
    by_path = set(files)
    by_name: dict[str, str] = {}
    for file_id in sorted(files, key=lambda f: (f.count("/"), len(f), f)):
        by_name.setdefault(posixpath.basename(file_id), file_id)

    images: list[ImageRef] = []
    for ref in refs:
        if ref.is_network:
            images.append(ref)
            continue
        file_id = ref.path if ref.path in by_path else None
        if file_id is None and ref.path.startswith(("./", "../")):
            candidate = posixpath.normpath(posixpath.join(posixpath.dirname(note_id), ref.path))
            file_id = candidate if candidate in by_path else None
        if file_id is None:
            file_id = by_name.get(posixpath.basename(ref.path))
        if file_id is None or not is_image_type(file_id):
            continue
        images.append(ImageRef(path=file_id, name=ref.name, source=ref.source, file=vault.vault_path / file_id))
    return images
