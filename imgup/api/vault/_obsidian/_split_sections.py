"""Markdown section splitting (private)."""

import re

from ..Section import Section

FENCE_PATTERN = re.compile(r"^ {0,3}(`{3,}|~{3,})")
HEADING_PATTERN = re.compile(r"^ {0,3}#{1,6}(\s|$)")
LIST_PATTERN = re.compile(r"^\s*([-*+]|\d+[.)])\s")
FRONTMATTER_DELIMITERS = ("---", "...")


def _block_type(line: str) -> str:
    stripped = line.lstrip()
    if stripped.startswith(">"):
        return "blockquote"
    if LIST_PATTERN.match(line):
        return "list"
    if stripped.startswith("|"):
        return "table"
    return "paragraph"


def _is_fence_close(line: str, marker: str) -> bool:
    stripped = line.strip()
    return stripped.startswith(marker) and set(stripped) == {marker[0]}


def _split_sections(text: str) -> list[Section]:
    """Split a note into structural sections.

    Offsets are absolute and half-open; a section ends at the end of its last
    line, excluding the line break. Blank lines separate blocks. An unclosed
    fence runs to the end of the note.
    """
    lines = text.splitlines(keepends=True)
    starts: list[int] = []
    offset = 0
    for line in lines:
        starts.append(offset)
        offset += len(line)

    def line_end(index: int) -> int:
        return starts[index] + len(lines[index].rstrip("\r\n"))

    sections: list[Section] = []
    i = 0
    n = len(lines)

    if n and lines[0].rstrip("\r\n") == "---":
        for j in range(1, n):
            if lines[j].rstrip("\r\n") in FRONTMATTER_DELIMITERS:
                sections.append(Section("yaml", 0, line_end(j)))
                i = j + 1
                break

    while i < n:
        line = lines[i]
        if not line.strip():
            i += 1
            continue

        fence = FENCE_PATTERN.match(line)
        if fence:
            marker = fence.group(1)
            j = i + 1
            while j < n and not _is_fence_close(lines[j], marker):
                j += 1
            last = min(j, n - 1)
            sections.append(Section("code", starts[i], line_end(last)))
            i = last + 1
            continue

        if HEADING_PATTERN.match(line):
            sections.append(Section("heading", starts[i], line_end(i)))
            i += 1
            continue

        block_type = _block_type(line)
        j = i
        while j + 1 < n:
            following = lines[j + 1]
            if not following.strip() or FENCE_PATTERN.match(following) or HEADING_PATTERN.match(following):
                break
            j += 1
        sections.append(Section(block_type, starts[i], line_end(j)))
        i = j + 1

    return sections
