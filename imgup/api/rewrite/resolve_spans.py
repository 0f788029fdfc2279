"""Find the link spans of one target inside one note (UNO: single function)."""

from __future__ import annotations

import posixpath
import re
from typing import TYPE_CHECKING
from urllib.parse import unquote

from ..link.parse_inline_refs import parse_inline_refs
from ..link.parse_wiki_refs import parse_wiki_refs
from ..link.split_linktext import split_linktext
from .LinkSpan import LinkSpan

if TYPE_CHECKING:
    from ..vault.Section import Section
    from ..vault.Vault import Vault

_FENCE_TAG = re.compile(r"\s*(?:`{3,}|~{3,})[ \t]*([^\s`]*)")


def _code_block_allowed(section_text: str, allowed_code_types: list[str]) -> bool:
    match = _FENCE_TAG.match(section_text)
    return bool(match) and match.group(1) in allowed_code_types


def resolve_spans(
    vault: Vault,
    target_id: str,
    doc_id: str,
    content: str,
    sections: list[Section],
    allowed_code_types: list[str],
) -> list[LinkSpan]:
    """Return the spans in ``content`` that embed ``target_id``.

    Inline paths are taken relative to the note's folder; wiki links go
    through the vault's first-match resolver. Network links and links that
    do not resolve are ignored. Spans come back in scan order, unsorted.

    Args:
        vault: Vault used to resolve wiki links
        target_id: Vault path of the image
        doc_id: Vault path of the note
        content: Text of the note, as scanned
        sections: Structural sections of ``content``
        allowed_code_types: Fence tags whose code blocks are still scanned
    """
    spans: list[LinkSpan] = []
    doc_dir = posixpath.dirname(doc_id)
    for section in sections:
        text = content[section.start_offset : section.end_offset]
        if section.type == "code" and not _code_block_allowed(text, allowed_code_types):
            continue

        for match in parse_inline_refs(text):
            if match.is_network:
                continue
            decoded = unquote(match.target)
            if posixpath.isabs(decoded):
                continue
            if posixpath.normpath(posixpath.join(doc_dir, decoded)) != target_id:
                continue
            spans.append(
                LinkSpan(
                    target_id=target_id,
                    display_name=match.display or "image",
                    start_offset=section.start_offset + match.start,
                    end_offset=section.start_offset + match.end,
                )
            )

        for match in parse_wiki_refs(text):
            path, _subpath = split_linktext(match.target)
            if vault.resolve_link(path, doc_id) != target_id:
                continue
            spans.append(
                LinkSpan(
                    target_id=target_id,
                    display_name=match.target + match.residual,
                    start_offset=section.start_offset + match.start,
                    end_offset=section.start_offset + match.end,
                )
            )
    return spans
