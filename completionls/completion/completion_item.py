"""
Completion item model.

A ``CompletionItemBuilder`` is filled in step by step by the renderer and
the insertion heuristics; ``build()`` freezes it into a ``CompletionItem``.
"""

from __future__ import annotations

from dataclasses import dataclass

from lsprotocol.types import Range

from completionls.context.completion_context import SnippetCap
from completionls.context.types import CompletionItemKind, CompletionScore


@dataclass(frozen=True)
class CompletionItem:
    """A rendered, presentation-ready completion item."""

    label: str
    source_range: Range
    insert_text: str
    is_snippet: bool = False
    kind: CompletionItemKind | None = None
    detail: str | None = None
    documentation: str | None = None
    deprecated: bool = False
    score: CompletionScore | None = None

    # Filter text when it differs from the label (e.g. `foo` for `foo(…)`)
    lookup: str | None = None

    # Ask the client to show parameter info after insertion
    trigger_call_info: bool = False

    @property
    def filter_text(self) -> str:
        return self.lookup if self.lookup is not None else self.label


@dataclass
class CompletionItemBuilder:
    """Mutable counterpart of ``CompletionItem``."""

    label: str
    source_range: Range
    insert_text: str | None = None
    is_snippet: bool = False
    kind: CompletionItemKind | None = None
    detail: str | None = None
    documentation: str | None = None
    deprecated: bool = False
    score: CompletionScore | None = None
    lookup: str | None = None
    trigger_call_info: bool = False

    def set_insert_text(self, text: str) -> None:
        """Insert ``text`` literally."""
        self.insert_text = text
        self.is_snippet = False

    def insert_snippet(self, cap: SnippetCap, snippet: str) -> None:
        """
        Insert ``snippet`` as snippet syntax.

        ``cap`` is required so snippet markers can only reach items when
        the client declared snippet support.
        """
        self.insert_text = snippet
        self.is_snippet = True

    def build(self) -> CompletionItem:
        return CompletionItem(
            label=self.label,
            source_range=self.source_range,
            insert_text=self.insert_text if self.insert_text is not None else self.label,
            is_snippet=self.is_snippet,
            kind=self.kind,
            detail=self.detail,
            documentation=self.documentation,
            deprecated=self.deprecated,
            score=self.score,
            lookup=self.lookup,
            trigger_call_info=self.trigger_call_info,
        )
