"""
Tests for completionls/completion/completion_item.py
"""
from __future__ import annotations

from lsprotocol.types import Position, Range

from completionls.completion.completion_item import CompletionItem, CompletionItemBuilder
from completionls.context.completion_context import SnippetCap
from completionls.context.types import CompletionItemKind, CompletionScore


RANGE = Range(start=Position(line=0, character=4), end=Position(line=0, character=6))


class TestCompletionItemBuilder:
    """Tests for the mutable builder."""

    def test_insert_text_defaults_to_label(self):
        """Test an untouched builder inserts its label."""
        item = CompletionItemBuilder(label="foo", source_range=RANGE).build()

        assert item.insert_text == "foo"
        assert item.is_snippet is False
        assert item.source_range == RANGE

    def test_insert_snippet(self):
        """Test snippet text marks the item as a snippet."""
        builder = CompletionItemBuilder(label="foo", source_range=RANGE)

        builder.insert_snippet(SnippetCap(), "foo($0)")

        item = builder.build()
        assert item.insert_text == "foo($0)"
        assert item.is_snippet is True

    def test_set_insert_text_clears_snippet(self):
        """Test literal text replaces an earlier snippet."""
        builder = CompletionItemBuilder(label="foo", source_range=RANGE)
        builder.insert_snippet(SnippetCap(), "foo($0)")

        builder.set_insert_text("foo!")

        item = builder.build()
        assert item.insert_text == "foo!"
        assert item.is_snippet is False

    def test_all_fields_carried(self):
        """Test build() copies every attribute."""
        builder = CompletionItemBuilder(label="x", source_range=RANGE)
        builder.kind = CompletionItemKind.BINDING
        builder.detail = "u32"
        builder.documentation = "docs"
        builder.deprecated = True
        builder.score = CompletionScore.TYPE_MATCH
        builder.lookup = "xx"
        builder.trigger_call_info = True

        item = builder.build()

        assert item == CompletionItem(
            label="x",
            source_range=RANGE,
            insert_text="x",
            kind=CompletionItemKind.BINDING,
            detail="u32",
            documentation="docs",
            deprecated=True,
            score=CompletionScore.TYPE_MATCH,
            lookup="xx",
            trigger_call_info=True,
        )


class TestCompletionItem:
    """Tests for the frozen item."""

    def test_filter_text_falls_back_to_label(self):
        """Test items without a lookup filter by label."""
        item = CompletionItem(label="foo", source_range=RANGE, insert_text="foo")

        assert item.filter_text == "foo"

    def test_filter_text_uses_lookup(self):
        """Test `foo(…)` filters by `foo`."""
        item = CompletionItem(label="foo(…)", source_range=RANGE, insert_text="foo($0)", lookup="foo")

        assert item.filter_text == "foo"


class TestCompletionScore:
    """Tests for score ordering."""

    def test_type_and_name_outranks_type(self):
        """Test TypeAndNameMatch is the stronger score."""
        assert CompletionScore.TYPE_MATCH < CompletionScore.TYPE_AND_NAME_MATCH
        assert not CompletionScore.TYPE_AND_NAME_MATCH < CompletionScore.TYPE_MATCH
        assert max(CompletionScore) is CompletionScore.TYPE_AND_NAME_MATCH
