"""Rebuild a note from its link spans (UNO: single function)."""

from collections.abc import Callable

from .LinkSpan import LinkSpan


def apply_spans(
    content: str,
    spans: list[LinkSpan],
    url_map: dict[str, str],
    format_name: Callable[[str], str] | None = None,
) -> str:
    """Return ``content`` with each span replaced by ``![name](url)``.

    Spans must be sorted and non-overlapping. Text outside spans is copied
    verbatim; a span whose target has no URL keeps its original text.
    """
    parts: list[str] = []
    cursor = 0
    for span in spans:
        parts.append(content[cursor : span.start_offset])
        url = url_map.get(span.target_id)
        if url is None:
            parts.append(content[span.start_offset : span.end_offset])
        else:
            name = format_name(span.display_name) if format_name else span.display_name
            parts.append(f"![{name}]({url})")
        cursor = span.end_offset
    parts.append(content[cursor:])
    return "".join(parts)
