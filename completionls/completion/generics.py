from __future__ import annotations

from completionls.completion.completion_item import CompletionItemBuilder
from completionls.context.completion_context import CompletionContext
from completionls.hir.candidates import AdtCandidate, ScopeDef, TypeAliasCandidate


def has_non_default_type_params(scope_def: ScopeDef) -> bool:
    """Only structs/unions/enums and type aliases take generic arguments here."""
    if isinstance(scope_def, (AdtCandidate, TypeAliasCandidate)):
        return scope_def.has_non_default_type_params()
    return False


def add_generic_angles(
    builder: CompletionItemBuilder,
    ctx: CompletionContext,
    local_name: str,
    scope_def: ScopeDef,
) -> CompletionItemBuilder:
    """
    Complete ``Vec`` as ``Vec<$0>`` in a type position.

    Applies when no type arguments follow the cursor yet, the item has a
    generic parameter without a default, snippets are supported and call
    parenthesis insertion is enabled. Replaces any call syntax.
    """
    if not ctx.is_path_type or ctx.has_type_args:
        return builder
    if not ctx.config.add_call_parenthesis:
        return builder

    cap = ctx.config.snippet_cap
    if cap is None:
        return builder

    if not has_non_default_type_params(scope_def):
        return builder

    builder.lookup = local_name
    builder.label = f"{local_name}<…>"
    builder.insert_snippet(cap, f"{local_name}<$0>")
    return builder
