"""
Tests for completionls/completion/call_parens.py

Tests add_call_parens with:
- Each suppression rule (config, use item, existing call, fn expected, no snippets)
- Empty vs non-empty parameter lists
- Argument snippets on/off, named vs anonymous params
- Placeholder escaping
"""
from __future__ import annotations

import pytest

from completionls.completion.call_parens import Params, add_call_parens, escape_snippet_text
from completionls.completion.completion_item import CompletionItemBuilder
from completionls.context.completion_context import (
    CompletionConfig,
    CompletionContext,
    SnippetCap,
)
from completionls.hir.candidates import Type


def make_context(
    add_call_parenthesis: bool = True,
    add_call_argument_snippets: bool = True,
    snippets: bool = True,
    **kwargs,
) -> CompletionContext:
    """Factory function to create a CompletionContext with a given config."""
    return CompletionContext(
        config=CompletionConfig(
            add_call_parenthesis=add_call_parenthesis,
            add_call_argument_snippets=add_call_argument_snippets,
            snippet_cap=SnippetCap.new(snippets),
        ),
        **kwargs,
    )


def apply(ctx: CompletionContext, name: str, params: Params) -> CompletionItemBuilder:
    builder = CompletionItemBuilder(label=name, source_range=ctx.source_range)
    return add_call_parens(builder, ctx, name, params)


SUPPRESSING_CONTEXTS = {
    "config_disabled": dict(add_call_parenthesis=False),
    "use_item": dict(use_item_syntax="use crate::m::foo;"),
    "already_called": dict(is_call=True),
    "fn_expected": dict(expected_type=Type("fn(u8, u8)", is_fn=True)),
    "no_snippets": dict(snippets=False),
}


class TestParams:
    """Tests for the Params value."""

    def test_named_params(self):
        """Test named params keep their order and length."""
        params = Params.named(["x", "y"])

        assert params.names == ("x", "y")
        assert len(params) == 2
        assert params.is_named
        assert not params.is_empty()

    def test_anonymous_params(self):
        """Test anonymous params only carry a count."""
        params = Params.anonymous(3)

        assert params.names is None
        assert len(params) == 3
        assert not params.is_named

    def test_empty_params(self):
        """Test both shapes can be empty."""
        assert Params.named([]).is_empty()
        assert Params.anonymous(0).is_empty()


class TestSuppression:
    """Call syntax is suppressed regardless of parameter count."""

    @pytest.mark.parametrize(
        "overrides",
        list(SUPPRESSING_CONTEXTS.values()),
        ids=list(SUPPRESSING_CONTEXTS.keys()),
    )
    @pytest.mark.parametrize(
        "params",
        [Params.named([]), Params.named(["x", "y"]), Params.anonymous(0), Params.anonymous(2)],
        ids=["named-empty", "named-two", "anon-empty", "anon-two"],
    )
    def test_bare_name_kept(self, overrides: dict, params: Params):
        """Test suppressed sites keep the bare name as label and insert text."""
        builder = apply(make_context(**overrides), "foo", params)

        assert builder.label == "foo"
        assert builder.insert_text is None
        assert builder.is_snippet is False
        assert builder.lookup is None
        assert builder.trigger_call_info is False

    def test_non_fn_expected_type_does_not_suppress(self):
        """Test an expected non-function type still gets call syntax."""
        builder = apply(make_context(expected_type=Type("u32")), "foo", Params.named([]))

        assert builder.insert_text == "foo()$0"


class TestSynthesis:
    """Tests for the inserted call syntax."""

    def test_no_args(self):
        """Test `no_args` inserts `no_args()$0`."""
        builder = apply(make_context(), "no_args", Params.named([]))

        assert builder.label == "no_args()"
        assert builder.insert_text == "no_args()$0"
        assert builder.is_snippet is True
        assert builder.lookup == "no_args"
        assert builder.trigger_call_info is False

    def test_with_args_snippets(self):
        """Test `with_args(x, y)` inserts one placeholder per parameter."""
        builder = apply(make_context(), "with_args", Params.named(["x", "y"]))

        assert builder.label == "with_args(…)"
        assert builder.insert_text == "with_args(${1:x}, ${2:y})$0"
        assert builder.lookup == "with_args"
        assert builder.trigger_call_info is True

    def test_with_args_snippets_disabled(self):
        """Test disabling argument snippets leaves a single cursor stop."""
        ctx = make_context(add_call_argument_snippets=False)

        builder = apply(ctx, "with_args", Params.named(["x", "y"]))

        assert builder.label == "with_args(…)"
        assert builder.insert_text == "with_args($0)"
        assert builder.trigger_call_info is True

    def test_anonymous_params_get_single_cursor(self):
        """Test tuple variants never get placeholders."""
        builder = apply(make_context(), "Some", Params.anonymous(1))

        assert builder.label == "Some(…)"
        assert builder.insert_text == "Some($0)"

    def test_existing_lookup_kept(self):
        """Test a lookup chosen earlier (qualified variant) is not overwritten."""
        ctx = make_context()
        builder = CompletionItemBuilder(label="Foo::Bar", source_range=ctx.source_range)
        builder.lookup = "Bar"

        add_call_parens(builder, ctx, "Foo::Bar", Params.anonymous(1))

        assert builder.lookup == "Bar"
        assert builder.insert_text == "Foo::Bar($0)"

    def test_placeholders_escaped(self):
        """Test snippet metacharacters in placeholder text are escaped."""
        builder = apply(make_context(), "f", Params.named(["a$b", "c}"]))

        assert builder.insert_text == "f(${1:a\\$b}, ${2:c\\}})$0"


class TestEscapeSnippetText:
    """Tests for escape_snippet_text."""

    def test_plain_identifier_unchanged(self):
        """Test identifiers pass through."""
        assert escape_snippet_text("ho_ge_") == "ho_ge_"

    def test_backslash_escaped_first(self):
        """Test backslashes are doubled before other escapes are added."""
        assert escape_snippet_text("\\$") == "\\\\\\$"
