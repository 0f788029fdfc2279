"""Tests for imgup.api.rewrite.SpanBuilder."""

from imgup.api.rewrite.LinkSpan import LinkSpan
from imgup.api.rewrite.SpanBuilder import SpanBuilder


def test_spans_sorted_across_targets():
    builder = SpanBuilder()
    builder.add("n.md", [LinkSpan("b.png", "b", 20, 30)])
    builder.add("n.md", [LinkSpan("a.png", "a", 0, 10)])
    span_set, conflicts = builder.build()
    assert conflicts == []
    assert [s.target_id for s in span_set["n.md"]] == ["a.png", "b.png"]


def test_adjacent_spans_allowed():
    builder = SpanBuilder()
    builder.add("n.md", [LinkSpan("a.png", "a", 0, 10), LinkSpan("b.png", "b", 10, 20)])
    span_set, conflicts = builder.build()
    assert not conflicts
    assert len(span_set["n.md"]) == 2


def test_overlap_excludes_only_that_document():
    builder = SpanBuilder()
    builder.add("bad.md", [LinkSpan("a.png", "outer", 0, 24)])
    builder.add("bad.md", [LinkSpan("a.png", "inner", 6, 16)])
    builder.add("good.md", [LinkSpan("a.png", "a", 0, 10)])
    span_set, conflicts = builder.build()
    assert list(span_set) == ["good.md"]
    assert [c.doc_id for c in conflicts] == ["bad.md"]
    assert "bad.md" in str(conflicts[0])


def test_documents_without_spans_left_out():
    builder = SpanBuilder()
    builder.add("n.md", [])
    assert builder.build() == ({}, [])
