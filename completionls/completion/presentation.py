"""
Rendering of resolved candidates as completion items.

Each ``render_*`` function is a pure mapping from (context, candidate) to
at most one ``CompletionItem``. ``Completions`` is the per-request
accumulator exposing one ``add_*`` operation per candidate kind; it keeps
items in insertion order and never re-sorts them.

A candidate that cannot be rendered (a procedural macro, a const or type
alias without a name) yields no item; the rest of the batch is unaffected.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import assert_never

from completionls.completion.call_parens import Params, add_call_parens
from completionls.completion.completion_item import (
    CompletionItem,
    CompletionItemBuilder,
)
from completionls.completion.enum_variant import variant_detail
from completionls.completion.generics import add_generic_angles
from completionls.completion.macro_braces import guess_macro_braces
from completionls.completion.score import compute_score
from completionls.context.completion_context import CompletionContext
from completionls.context.types import AdtKind, CompletionItemKind, StructKind
from completionls.hir.candidates import (
    AdtCandidate,
    BuiltinTypeCandidate,
    Candidate,
    ConstCandidate,
    EnumVariantCandidate,
    FieldCandidate,
    FunctionCandidate,
    GenericParamCandidate,
    LocalCandidate,
    MacroCandidate,
    ModuleCandidate,
    ScopeDef,
    SelfTypeCandidate,
    StaticCandidate,
    TraitCandidate,
    TupleFieldCandidate,
    TypeAliasCandidate,
    UnknownCandidate,
)
from completionls.hir.display import const_label, macro_label, type_label


def _builder(ctx: CompletionContext, label: str) -> CompletionItemBuilder:
    return CompletionItemBuilder(label=label, source_range=ctx.source_range)


def render_field(ctx: CompletionContext, field: FieldCandidate) -> CompletionItem:
    builder = _builder(ctx, field.name)
    builder.kind = CompletionItemKind.FIELD
    # Unknown field types still show `{unknown}` to surface inference gaps.
    builder.detail = field.ty.display
    builder.documentation = field.docs
    builder.deprecated = field.is_deprecated
    builder.score = compute_score(ctx, field.ty, field.name)
    return builder.build()


def render_tuple_field(
    ctx: CompletionContext, field: TupleFieldCandidate
) -> CompletionItem:
    builder = _builder(ctx, str(field.index))
    builder.kind = CompletionItemKind.FIELD
    builder.detail = field.ty.display
    return builder.build()


def render_function(
    ctx: CompletionContext,
    func: FunctionCandidate,
    local_name: str | None = None,
) -> CompletionItem:
    name = local_name if local_name is not None else func.name
    signature = func.signature

    builder = _builder(ctx, name)
    builder.kind = (
        CompletionItemKind.METHOD if func.has_self_param else CompletionItemKind.FUNCTION
    )
    builder.documentation = func.docs
    builder.deprecated = func.is_deprecated
    builder.detail = str(signature)

    param_names = signature.parameter_names
    if signature.has_self_param:
        param_names = param_names[1:]
    params = Params.named(param.lstrip("_") for param in param_names)

    add_call_parens(builder, ctx, name, params)
    return builder.build()


def render_macro(
    ctx: CompletionContext,
    macro: MacroCandidate,
    local_name: str | None = None,
) -> CompletionItem | None:
    # Procedural macros have no source to describe.
    if macro.is_proc_macro:
        return None

    name = local_name if local_name is not None else macro.name
    if not name:
        return None

    builder = _builder(ctx, f"{name}!")
    builder.kind = CompletionItemKind.MACRO
    builder.documentation = macro.docs
    builder.deprecated = macro.is_deprecated
    builder.detail = macro_label(macro, name)

    needs_bang = ctx.use_item_syntax is None and not ctx.is_macro_call
    cap = ctx.config.snippet_cap
    if needs_bang and cap is not None:
        bra, ket = guess_macro_braces(name, macro.docs or "")
        builder.insert_snippet(cap, f"{name}!{bra}$0{ket}")
        builder.label = f"{name}!{bra}…{ket}"
    elif needs_bang:
        builder.set_insert_text(f"{name}!")
    else:
        builder.set_insert_text(name)

    return builder.build()


def render_const(ctx: CompletionContext, const: ConstCandidate) -> CompletionItem | None:
    if not const.name:
        return None

    builder = _builder(ctx, const.name)
    builder.kind = CompletionItemKind.CONST
    builder.documentation = const.docs
    builder.deprecated = const.is_deprecated
    builder.detail = const_label(const)
    return builder.build()


def render_type_alias(
    ctx: CompletionContext, alias: TypeAliasCandidate
) -> CompletionItem | None:
    if not alias.name:
        return None

    builder = _builder(ctx, alias.name)
    builder.kind = CompletionItemKind.TYPE_ALIAS
    builder.documentation = alias.docs
    builder.deprecated = alias.is_deprecated
    builder.detail = type_label(alias)
    return builder.build()


def render_enum_variant(
    ctx: CompletionContext,
    variant: EnumVariantCandidate,
    local_name: str | None = None,
    path: str | None = None,
) -> CompletionItem:
    """
    Render an enum variant, optionally under its qualified ``path``.

    Qualified variants are labelled ``Enum::Variant`` but filtered by the
    bare variant name. Tuple variants complete as calls.
    """
    name = local_name if local_name is not None else variant.name
    qualified_name = path if path is not None else name

    builder = _builder(ctx, qualified_name)
    builder.kind = CompletionItemKind.ENUM_VARIANT
    builder.documentation = variant.docs
    builder.deprecated = variant.is_deprecated
    builder.detail = variant_detail(variant.kind, variant.fields)

    if path is not None:
        builder.lookup = name

    if variant.kind is StructKind.TUPLE:
        add_call_parens(builder, ctx, qualified_name, Params.anonymous(len(variant.fields)))

    return builder.build()


def _scope_kind(scope_def: ScopeDef) -> CompletionItemKind:
    if isinstance(scope_def, ModuleCandidate):
        return CompletionItemKind.MODULE
    if isinstance(scope_def, AdtCandidate):
        if scope_def.adt_kind is AdtKind.ENUM:
            return CompletionItemKind.ENUM
        # Unions have no kind of their own.
        return CompletionItemKind.STRUCT
    if isinstance(scope_def, ConstCandidate):
        return CompletionItemKind.CONST
    if isinstance(scope_def, StaticCandidate):
        return CompletionItemKind.STATIC
    if isinstance(scope_def, TraitCandidate):
        return CompletionItemKind.TRAIT
    if isinstance(scope_def, TypeAliasCandidate):
        return CompletionItemKind.TYPE_ALIAS
    if isinstance(scope_def, BuiltinTypeCandidate):
        return CompletionItemKind.BUILTIN_TYPE
    if isinstance(scope_def, LocalCandidate):
        return CompletionItemKind.BINDING
    if isinstance(scope_def, (GenericParamCandidate, SelfTypeCandidate)):
        return CompletionItemKind.TYPE_PARAM
    if isinstance(scope_def, FunctionCandidate):
        return (
            CompletionItemKind.METHOD
            if scope_def.has_self_param
            else CompletionItemKind.FUNCTION
        )
    if isinstance(scope_def, EnumVariantCandidate):
        return CompletionItemKind.ENUM_VARIANT
    if isinstance(scope_def, MacroCandidate):
        return CompletionItemKind.MACRO
    if isinstance(scope_def, UnknownCandidate):
        return CompletionItemKind.UNKNOWN
    assert_never(scope_def)


def render_resolution(
    ctx: CompletionContext, local_name: str, scope_def: ScopeDef
) -> CompletionItem | None:
    """
    Render a name in scope bound to ``scope_def``.

    ``local_name`` is the name the item is visible under, which differs
    from its declared name for renaming imports.
    """
    if isinstance(scope_def, FunctionCandidate):
        return render_function(ctx, scope_def, local_name)
    if isinstance(scope_def, EnumVariantCandidate):
        return render_enum_variant(ctx, scope_def, local_name)
    if isinstance(scope_def, MacroCandidate):
        return render_macro(ctx, scope_def, local_name)
    if isinstance(scope_def, UnknownCandidate):
        builder = _builder(ctx, local_name)
        builder.kind = CompletionItemKind.UNKNOWN
        return builder.build()

    builder = _builder(ctx, local_name)

    if isinstance(
        scope_def,
        (AdtCandidate, ConstCandidate, StaticCandidate, TraitCandidate, TypeAliasCandidate),
    ):
        builder.deprecated = scope_def.is_deprecated
    if isinstance(scope_def, ConstCandidate) and scope_def.name:
        builder.detail = const_label(scope_def)
    if isinstance(scope_def, TypeAliasCandidate) and scope_def.name:
        builder.detail = type_label(scope_def)

    if isinstance(scope_def, LocalCandidate):
        if not scope_def.ty.is_unknown:
            builder.detail = scope_def.ty.display
        builder.score = compute_score(ctx, scope_def.ty, local_name)

    add_generic_angles(builder, ctx, local_name, scope_def)

    builder.kind = _scope_kind(scope_def)
    builder.documentation = _scope_docs(scope_def)
    return builder.build()


def _scope_docs(scope_def: ScopeDef) -> str | None:
    if isinstance(
        scope_def,
        (
            ModuleCandidate,
            AdtCandidate,
            ConstCandidate,
            StaticCandidate,
            TraitCandidate,
            TypeAliasCandidate,
        ),
    ):
        return scope_def.docs
    return None


class Completions:
    """
    Ordered, append-only list of items for one completion request.

    Owned by a single request; ranking consumers sort a copy by score.
    """

    def __init__(self) -> None:
        self._items: list[CompletionItem] = []

    def add(self, item: CompletionItem | CompletionItemBuilder | None) -> None:
        """Append an item; ``None`` and label-less items are skipped."""
        if item is None:
            return
        if isinstance(item, CompletionItemBuilder):
            item = item.build()
        if not item.label:
            return
        self._items.append(item)

    @property
    def items(self) -> list[CompletionItem]:
        return list(self._items)

    def __iter__(self) -> Iterator[CompletionItem]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    # ===== One operation per candidate kind =====

    def add_field(self, ctx: CompletionContext, field: FieldCandidate) -> None:
        self.add(render_field(ctx, field))

    def add_tuple_field(self, ctx: CompletionContext, field: TupleFieldCandidate) -> None:
        self.add(render_tuple_field(ctx, field))

    def add_function(
        self,
        ctx: CompletionContext,
        func: FunctionCandidate,
        local_name: str | None = None,
    ) -> None:
        self.add(render_function(ctx, func, local_name))

    def add_macro(
        self,
        ctx: CompletionContext,
        macro: MacroCandidate,
        local_name: str | None = None,
    ) -> None:
        self.add(render_macro(ctx, macro, local_name))

    def add_const(self, ctx: CompletionContext, const: ConstCandidate) -> None:
        self.add(render_const(ctx, const))

    def add_type_alias(self, ctx: CompletionContext, alias: TypeAliasCandidate) -> None:
        self.add(render_type_alias(ctx, alias))

    def add_enum_variant(
        self,
        ctx: CompletionContext,
        variant: EnumVariantCandidate,
        local_name: str | None = None,
    ) -> None:
        self.add(render_enum_variant(ctx, variant, local_name))

    def add_qualified_enum_variant(
        self, ctx: CompletionContext, variant: EnumVariantCandidate, path: str
    ) -> None:
        self.add(render_enum_variant(ctx, variant, path=path))

    def add_resolution(
        self, ctx: CompletionContext, local_name: str, scope_def: ScopeDef
    ) -> None:
        self.add(render_resolution(ctx, local_name, scope_def))

    def add_candidate(self, ctx: CompletionContext, candidate: Candidate) -> None:
        """
        Render any candidate under its own name.

        Fields go through their own operations; everything else is treated
        as a name in scope.
        """
        if isinstance(candidate, FieldCandidate):
            self.add_field(ctx, candidate)
        elif isinstance(candidate, TupleFieldCandidate):
            self.add_tuple_field(ctx, candidate)
        elif isinstance(candidate, MacroCandidate):
            self.add_macro(ctx, candidate)
        elif isinstance(candidate, (ConstCandidate, TypeAliasCandidate)):
            if candidate.name:
                self.add_resolution(ctx, candidate.name, candidate)
        else:
            self.add_resolution(ctx, candidate.name, candidate)
