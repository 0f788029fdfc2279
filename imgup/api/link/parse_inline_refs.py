"""Inline link parser (UNO: single function)."""

import re
from collections.abc import Iterator

from .RefMatch import KIND_INLINE, RefMatch

# Display text holds balanced brackets up to two levels deep, so a wiki
# embed written inside the brackets still yields an inline match while an
# earlier wiki embed on the same line does not start one.
_DISPLAY = r"(?:[^\[\]\n]|\[(?:[^\[\]\n]|\[[^\[\]\n]*\])*\])*"

INLINE_PATTERN = re.compile(
    r"(?P<embed>!)?\["
    r"(?:"
    rf"(?P<angle_display>{_DISPLAY})\]\(<(?P<angle_target>[^<>\n]+\.\w+)>\)"
    rf"|(?P<net_display>{_DISPLAY})\]\((?P<net_target>https?://[^\s)]+)(?:\s+\"[^\"]*\")?\)"
    rf"|(?P<path_display>{_DISPLAY})\]\((?P<path_target>(?:[^\s()<>]|\([^\s()<>]*\))+\.\w+)(?:\s+\"[^\"]*\"|\s*\|[^)\n]*)?\)"
    r")"
)


def parse_inline_refs(text: str, embeds_only: bool = True) -> Iterator[RefMatch]:
    """Extract ``![display](target)`` references from text.

    Args:
        text: Markdown content to parse
        embeds_only: Skip plain ``[text](target)`` links when True

    Yields:
        RefMatch objects in order of appearance
    """
    for match in INLINE_PATTERN.finditer(text):
        is_embed = bool(match.group("embed"))
        if embeds_only and not is_embed:
            continue
        for prefix in ("angle", "net", "path"):
            target = match.group(f"{prefix}_target")
            if target is not None:
                display = match.group(f"{prefix}_display")
                break
        yield RefMatch(
            kind=KIND_INLINE,
            display=display,
            target=target,
            start=match.start(),
            end=match.end(),
            is_network=target.startswith(("http://", "https://")),
            is_embed=is_embed,
            raw=match.group(0),
        )
