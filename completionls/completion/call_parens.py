"""
Call syntax for callable completions.

Functions, methods and tuple enum variants are completed as calls:
``foo()$0`` when there is nothing to pass, otherwise ``foo(${1:x}, ${2:y})$0``
or ``foo($0)`` depending on the argument-snippet option.
"""

from __future__ import annotations

from dataclasses import dataclass

from completionls.completion.completion_item import CompletionItemBuilder
from completionls.context.completion_context import CompletionContext


@dataclass(frozen=True)
class Params:
    """
    Parameters of a call site.

    Named params carry display names (functions); anonymous params only
    a count (tuple variants).
    """

    names: tuple[str, ...] | None = None
    count: int = 0

    @classmethod
    def named(cls, names) -> Params:
        names = tuple(names)
        return cls(names=names, count=len(names))

    @classmethod
    def anonymous(cls, count: int) -> Params:
        return cls(names=None, count=count)

    @property
    def is_named(self) -> bool:
        return self.names is not None

    def __len__(self) -> int:
        return self.count

    def is_empty(self) -> bool:
        return len(self) == 0


def escape_snippet_text(text: str) -> str:
    """Escape characters with a meaning inside a snippet placeholder."""
    return text.replace("\\", "\\\\").replace("$", "\\$").replace("}", "\\}")


def _suppress_call_parens(ctx: CompletionContext) -> bool:
    if not ctx.config.add_call_parenthesis:
        return True

    # `use foo::bar;` and `bar<|>()` already have the right shape
    if ctx.use_item_syntax is not None or ctx.is_call:
        return True

    # A function reference is wanted, not a call.
    if ctx.expected_type is not None and ctx.expected_type.is_fn:
        return True

    return False


def add_call_parens(
    builder: CompletionItemBuilder,
    ctx: CompletionContext,
    name: str,
    params: Params,
) -> CompletionItemBuilder:
    """
    Append call syntax for ``name`` to ``builder`` unless the site forbids it.

    Without snippet support the bare name is kept.
    """
    if _suppress_call_parens(ctx):
        return builder

    cap = ctx.config.snippet_cap
    if cap is None:
        return builder

    if params.is_empty():
        snippet = f"{name}()$0"
        label = f"{name}()"
    else:
        builder.trigger_call_info = True
        if ctx.config.add_call_argument_snippets and params.is_named:
            placeholders = ", ".join(
                f"${{{index}:{escape_snippet_text(param)}}}"
                for index, param in enumerate(params.names, start=1)
            )
            snippet = f"{name}({placeholders})$0"
        else:
            snippet = f"{name}($0)"
        label = f"{name}(…)"

    if builder.lookup is None:
        builder.lookup = name
    builder.label = label
    builder.insert_snippet(cap, snippet)
    return builder
