"""First-match link resolution for Obsidian vaults."""

from __future__ import annotations

__all__ = ["_LinkResolver"]

import posixpath


class _LinkResolver:
    """Resolves link paths the way Obsidian picks a link destination.

    Order, first match wins:
    1. ``./`` and ``../`` paths relative to the linking note's folder
    2. exact vault path
    3. any file whose path ends with the link path, preferring the linking
       note's folder, then the shortest path

    Links without an extension are tried as written, then with ``.md``.
    """

    def __init__(self, files: list[str]):
        self.files = set(files)
        self._by_name: dict[str, list[str]] = {}
        for path in sorted(files):
            self._by_name.setdefault(posixpath.basename(path), []).append(path)

    def resolve(self, linkpath: str, from_doc: str) -> str | None:
        linkpath = linkpath.strip()
        if not linkpath:
            return None
        candidates = [linkpath]
        if not posixpath.splitext(linkpath)[1]:
            candidates.append(linkpath + ".md")
        for candidate in candidates:
            found = self._resolve_one(candidate, posixpath.dirname(from_doc))
            if found:
                return found
        return None

    def _resolve_one(self, linkpath: str, source_dir: str) -> str | None:
        if linkpath.startswith(("./", "../")):
            relative = posixpath.normpath(posixpath.join(source_dir, linkpath))
            return relative if relative in self.files else None

        normalized = posixpath.normpath(linkpath.lstrip("/"))
        if normalized in self.files:
            return normalized

        suffix = "/" + normalized
        matches = [p for p in self._by_name.get(posixpath.basename(normalized), []) if p.endswith(suffix)]
        if not matches:
            return None
        return min(matches, key=lambda p: (posixpath.dirname(p) != source_dir, p.count("/"), p))
