"""Completion item rendering and ranking heuristics."""
from completionls.completion.call_parens import Params, add_call_parens
from completionls.completion.completion_item import (
    CompletionItem,
    CompletionItemBuilder,
)
from completionls.completion.enum_variant import variant_detail
from completionls.completion.generics import add_generic_angles
from completionls.completion.macro_braces import guess_macro_braces
from completionls.completion.presentation import Completions
from completionls.completion.score import compute_score

__all__ = [
    "Params",
    "add_call_parens",
    "CompletionItem",
    "CompletionItemBuilder",
    "variant_detail",
    "add_generic_angles",
    "guess_macro_braces",
    "Completions",
    "compute_score",
]
