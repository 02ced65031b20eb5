from __future__ import annotations

from dataclasses import dataclass, field

from lsprotocol.types import Position, Range

from completionls.hir.candidates import Type


@dataclass(frozen=True)
class SnippetCap:
    """
    Proof that the client accepts snippet insert text.

    Only obtainable through ``SnippetCap.new(True)`` (or the default
    config); item builders require one to install snippet text.
    """

    @classmethod
    def new(cls, allow_snippets: bool) -> SnippetCap | None:
        if allow_snippets:
            return cls()
        return None


@dataclass(frozen=True)
class CompletionConfig:
    """Options recognized by the renderer for one request."""

    # Append `()` / an argument snippet to callable completions.
    add_call_parenthesis: bool = True

    # Fill call parentheses with one placeholder per named parameter.
    add_call_argument_snippets: bool = True

    snippet_cap: SnippetCap | None = field(default_factory=SnippetCap)


@dataclass(frozen=True)
class ActiveParameter:
    """The call parameter the cursor is filling; ``ty`` is its display text."""

    name: str
    ty: str


@dataclass(frozen=True)
class RecordField:
    name: str
    ty: Type


@dataclass(frozen=True)
class RecordFieldSyntax:
    """
    A field initializer being completed, e.g. ``the_field: a.<|>``.

    ``resolved`` is the struct field the initializer resolved to, or None
    when resolution failed.
    """

    text: str
    resolved: RecordField | None = None


def _empty_range() -> Range:
    return Range(start=Position(line=0, character=0), end=Position(line=0, character=0))


@dataclass(frozen=True)
class CompletionContext:
    """
    Snapshot of the cursor site for one completion request.

    Built once by the candidate provider and shared read-only by every
    rendering operation of that request.
    """

    # Span the completion replaces
    source_range: Range = field(default_factory=_empty_range)

    # Type position (`fn f(x: Ve<|>)`) and whether `<...>` already follows
    is_path_type: bool = False
    has_type_args: bool = False

    # Cursor sits right before an argument list (`f<|>()`)
    is_call: bool = False

    # Cursor sits in a macro invocation name (`frob<|>!()`)
    is_macro_call: bool = False

    # Text of the enclosing `use` item, if any
    use_item_syntax: str | None = None

    active_parameter: ActiveParameter | None = None
    record_field_syntax: RecordFieldSyntax | None = None
    expected_type: Type | None = None

    config: CompletionConfig = field(default_factory=CompletionConfig)

    @property
    def snippet_cap(self) -> SnippetCap | None:
        return self.config.snippet_cap
