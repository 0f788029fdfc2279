"""Tests for imgup.api.vault._obsidian._split_sections."""

from imgup.api.vault._obsidian._split_sections import _split_sections


def _texts(text):
    return [(s.type, text[s.start_offset : s.end_offset]) for s in _split_sections(text)]


def test_heading_paragraph_and_code():
    text = "# Title\n\nPara ![](a.png)\n\n```python\n![](a.png)\n```\n"
    assert _texts(text) == [
        ("heading", "# Title"),
        ("paragraph", "Para ![](a.png)"),
        ("code", "```python\n![](a.png)\n```"),
    ]


def test_front_matter_is_yaml_section():
    text = "---\ntitle: x\n---\nBody\n"
    assert _texts(text) == [("yaml", "---\ntitle: x\n---"), ("paragraph", "Body")]


def test_block_types():
    text = "> quote\n> more\n\n- item\n- item 2\n\n| a | b |\n|---|---|\n"
    assert [t for t, _ in _texts(text)] == ["blockquote", "list", "table"]


def test_tilde_fence_and_unclosed_fence():
    text = "~~~ad-quote\n![](a.png)\n~~~\n\n```\nnever closed\n"
    assert _texts(text) == [
        ("code", "~~~ad-quote\n![](a.png)\n~~~"),
        ("code", "```\nnever closed"),
    ]


def test_blank_lines_inside_fence_do_not_split():
    text = "```\na\n\nb\n```"
    assert _texts(text) == [("code", "```\na\n\nb\n```")]


def test_crlf_offsets_exclude_line_break():
    text = "para one\r\n\r\npara two\r\n"
    assert _texts(text) == [("paragraph", "para one"), ("paragraph", "para two")]


def test_empty_text():
    assert _split_sections("") == []
