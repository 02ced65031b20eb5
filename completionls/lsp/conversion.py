"""
Conversion of rendered completion items to LSP ``CompletionItem``s.
"""

from __future__ import annotations

from collections.abc import Iterable

from lsprotocol import types as lsp

from completionls.completion.completion_item import CompletionItem
from completionls.context.types import CompletionItemKind, CompletionScore


COMPLETION_ITEM_KINDS: dict[CompletionItemKind, lsp.CompletionItemKind] = {
    CompletionItemKind.FIELD: lsp.CompletionItemKind.Field,
    CompletionItemKind.MODULE: lsp.CompletionItemKind.Module,
    CompletionItemKind.STRUCT: lsp.CompletionItemKind.Struct,
    CompletionItemKind.ENUM: lsp.CompletionItemKind.Enum,
    CompletionItemKind.ENUM_VARIANT: lsp.CompletionItemKind.EnumMember,
    CompletionItemKind.CONST: lsp.CompletionItemKind.Constant,
    CompletionItemKind.STATIC: lsp.CompletionItemKind.Value,
    CompletionItemKind.TRAIT: lsp.CompletionItemKind.Interface,
    CompletionItemKind.TYPE_ALIAS: lsp.CompletionItemKind.Struct,
    CompletionItemKind.BUILTIN_TYPE: lsp.CompletionItemKind.Struct,
    CompletionItemKind.TYPE_PARAM: lsp.CompletionItemKind.TypeParameter,
    CompletionItemKind.BINDING: lsp.CompletionItemKind.Variable,
    CompletionItemKind.MACRO: lsp.CompletionItemKind.Method,
    CompletionItemKind.FUNCTION: lsp.CompletionItemKind.Function,
    CompletionItemKind.METHOD: lsp.CompletionItemKind.Method,
    CompletionItemKind.UNKNOWN: lsp.CompletionItemKind.Text,
}

TRIGGER_PARAMETER_HINTS = lsp.Command(
    title="triggerParameterHints",
    command="editor.action.triggerParameterHints",
)


def to_lsp_completion_item(item: CompletionItem) -> lsp.CompletionItem:
    """Convert one rendered item; the replace range comes from the item."""
    result = lsp.CompletionItem(
        label=item.label,
        kind=COMPLETION_ITEM_KINDS[item.kind] if item.kind is not None else None,
        detail=item.detail,
        filter_text=item.filter_text,
        insert_text_format=(
            lsp.InsertTextFormat.Snippet if item.is_snippet else lsp.InsertTextFormat.PlainText
        ),
        text_edit=lsp.TextEdit(range=item.source_range, new_text=item.insert_text),
    )

    if item.documentation:
        result.documentation = lsp.MarkupContent(
            kind=lsp.MarkupKind.Markdown, value=item.documentation
        )

    if item.deprecated:
        result.deprecated = True
        result.tags = [lsp.CompletionItemTag.Deprecated]

    if item.trigger_call_info:
        result.command = TRIGGER_PARAMETER_HINTS

    return result


def rank_items(items: Iterable[CompletionItem]) -> list[lsp.CompletionItem]:
    """
    Convert items and order them for the client.

    Scored items move ahead of unscored ones (stronger score first); ties
    keep accumulator order. ``sort_text`` pins the final order, and the
    best type-and-name match is preselected.
    """
    ordered = sorted(
        items,
        key=lambda item: item.score.value if item.score else 0,
        reverse=True,
    )

    results: list[lsp.CompletionItem] = []
    for index, item in enumerate(ordered):
        converted = to_lsp_completion_item(item)
        converted.sort_text = f"{index:05}"
        if item.score is CompletionScore.TYPE_AND_NAME_MATCH:
            converted.preselect = True
        results.append(converted)
    return results
