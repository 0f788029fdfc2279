"""Collect upload candidates from a note (UNO: single function)."""

import posixpath
from urllib.parse import unquote

from .ImageRef import ImageRef
from .parse_inline_refs import parse_inline_refs
from .parse_wiki_refs import parse_wiki_refs
from .split_linktext import split_linktext


def extract_image_refs(text: str) -> list[ImageRef]:
    """Return one ImageRef per image embed in ``text``.

    Inline embeds come first, then wiki embeds, each in document order.
    Local paths are percent-decoded; ``source`` keeps the literal snippet.
    """
    refs: list[ImageRef] = []
    for match in parse_inline_refs(text):
        path = match.target if match.is_network else unquote(match.target)
        refs.append(ImageRef(path=path, name=match.display, source=match.raw))
    for match in parse_wiki_refs(text):
        path, _subpath = split_linktext(match.target)
        stem = posixpath.splitext(posixpath.basename(path))[0]
        refs.append(ImageRef(path=path, name=f"{stem}{match.residual}", source=match.raw))
    return refs
