"""
Tests for completionls/lsp/conversion.py
"""
from __future__ import annotations

import pytest
from lsprotocol import types as lsp

from completionls.completion.completion_item import CompletionItem
from completionls.context.types import CompletionItemKind, CompletionScore
from completionls.lsp.conversion import (
    COMPLETION_ITEM_KINDS,
    TRIGGER_PARAMETER_HINTS,
    rank_items,
    to_lsp_completion_item,
)


RANGE = lsp.Range(
    start=lsp.Position(line=3, character=8), end=lsp.Position(line=3, character=10)
)


def make_item(label: str = "foo", **kwargs) -> CompletionItem:
    """Factory function to create a rendered item."""
    kwargs.setdefault("insert_text", label)
    return CompletionItem(label=label, source_range=RANGE, **kwargs)


class TestToLspCompletionItem:
    """Tests for single-item conversion."""

    def test_plain_item(self):
        """Test a plain item becomes a plain-text text edit."""
        result = to_lsp_completion_item(make_item(kind=CompletionItemKind.BINDING, detail="u32"))

        assert result.label == "foo"
        assert result.kind == lsp.CompletionItemKind.Variable
        assert result.detail == "u32"
        assert result.filter_text == "foo"
        assert result.insert_text_format == lsp.InsertTextFormat.PlainText
        assert result.text_edit == lsp.TextEdit(range=RANGE, new_text="foo")
        assert result.documentation is None
        assert result.deprecated is None
        assert result.tags is None
        assert result.command is None

    def test_snippet_item(self):
        """Test snippets keep their markers and lookup becomes filter text."""
        item = make_item(
            label="with_args(…)",
            insert_text="with_args(${1:x}, ${2:y})$0",
            is_snippet=True,
            lookup="with_args",
            trigger_call_info=True,
        )

        result = to_lsp_completion_item(item)

        assert result.insert_text_format == lsp.InsertTextFormat.Snippet
        assert result.text_edit.new_text == "with_args(${1:x}, ${2:y})$0"
        assert result.filter_text == "with_args"
        assert result.command == TRIGGER_PARAMETER_HINTS

    def test_documentation_as_markdown(self):
        """Test docs are sent as markdown."""
        result = to_lsp_completion_item(make_item(documentation="Creates a `Vec`."))

        assert result.documentation == lsp.MarkupContent(
            kind=lsp.MarkupKind.Markdown, value="Creates a `Vec`."
        )

    def test_deprecated(self):
        """Test deprecation sets both the flag and the tag."""
        result = to_lsp_completion_item(make_item(deprecated=True))

        assert result.deprecated is True
        assert result.tags == [lsp.CompletionItemTag.Deprecated]

    def test_no_kind(self):
        """Test items without a kind convert without one."""
        assert to_lsp_completion_item(make_item()).kind is None

    @pytest.mark.parametrize("kind", list(CompletionItemKind))
    def test_every_kind_mapped(self, kind: CompletionItemKind):
        """Test every item kind has a protocol kind."""
        assert to_lsp_completion_item(make_item(kind=kind)).kind == COMPLETION_ITEM_KINDS[kind]


class TestRankItems:
    """Tests for rank_items."""

    def test_scored_items_first(self):
        """Test stronger scores come first and ties keep insertion order."""
        items = [
            make_item("another_field"),
            make_item("another_good_type", score=CompletionScore.TYPE_MATCH),
            make_item("the_field", score=CompletionScore.TYPE_AND_NAME_MATCH),
            make_item("other_good_type", score=CompletionScore.TYPE_MATCH),
            make_item("zzz"),
        ]

        ranked = rank_items(items)

        assert [item.label for item in ranked] == [
            "the_field",
            "another_good_type",
            "other_good_type",
            "another_field",
            "zzz",
        ]
        assert [item.sort_text for item in ranked] == ["00000", "00001", "00002", "00003", "00004"]

    def test_preselect_best_match(self):
        """Test only type-and-name matches are preselected."""
        ranked = rank_items(
            [
                make_item("a", score=CompletionScore.TYPE_MATCH),
                make_item("b", score=CompletionScore.TYPE_AND_NAME_MATCH),
            ]
        )

        assert ranked[0].preselect is True
        assert ranked[1].preselect is None

    def test_unscored_order_unchanged(self):
        """Test a batch without scores keeps accumulator order."""
        ranked = rank_items([make_item(label) for label in ("c", "a", "b")])

        assert [item.label for item in ranked] == ["c", "a", "b"]

    def test_empty(self):
        """Test no items rank to an empty list."""
        assert rank_items([]) == []
