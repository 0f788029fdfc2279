"""Wikilink parser (UNO: single function)."""

import re
from collections.abc import Iterator

from .RefMatch import KIND_WIKI, RefMatch

# Compiled regex patterns for performance
# The residual keeps an escaped pipe (\|) as written, common in markdown tables.
WIKI_PATTERN = re.compile(r"(?P<embed>!)?\[\[(?P<target>[^\[\]|\n]+?)(?P<residual>\s*\\?\|[^\[\]\n]*)?\]\]")


def parse_wiki_refs(text: str, embeds_only: bool = True) -> Iterator[RefMatch]:
    """Extract ``![[target|display]]`` references from text.

    Args:
        text: Markdown content to parse
        embeds_only: Skip plain ``[[target]]`` links when True

    Yields:
        RefMatch objects for each wiki link found
    """
    for match in WIKI_PATTERN.finditer(text):
        is_embed = bool(match.group("embed"))
        if embeds_only and not is_embed:
            continue
        residual = match.group("residual") or ""
        yield RefMatch(
            kind=KIND_WIKI,
            display=residual.lstrip().lstrip("\\")[1:].strip(),
            target=match.group("target"),
            start=match.start(),
            end=match.end(),
            residual=residual,
            is_embed=is_embed,
            raw=match.group(0),
        )
