"""
Candidate descriptors handed over by the resolution engine.

Every candidate kind is a frozen dataclass and ``Candidate`` is the closed
union of all of them. Consumers dispatch on the concrete class and finish
with ``assert_never`` so a new kind cannot be added silently.

The resolution engine materializes names, type display strings, signatures
and documentation before rendering starts; nothing here performs lookup.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Union

from completionls.context.types import AdtKind, StructKind
from completionls.hir.display import function_label


UNKNOWN_TYPE_DISPLAY = "{unknown}"

# Attribute path is the leading identifier path, e.g. ``deprecated`` in
# ``deprecated(since = "1.0.0")``.
_ATTRIBUTE_PATH = re.compile(r"^\s*([A-Za-z_][A-Za-z0-9_]*(?:::[A-Za-z_][A-Za-z0-9_]*)*)")


@dataclass(frozen=True)
class Type:
    """A resolved type as seen by completion: its display text plus a few flags."""

    display: str
    is_unknown: bool = False
    is_fn: bool = False

    @classmethod
    def unknown(cls) -> Type:
        return cls(display=UNKNOWN_TYPE_DISPLAY, is_unknown=True)

    def __str__(self) -> str:
        return self.display


@dataclass(frozen=True)
class GenericParam:
    """A generic type parameter declared on an item."""

    name: str
    default: str | None = None

    @property
    def has_default(self) -> bool:
        return self.default is not None


@dataclass(frozen=True)
class VariantField:
    """A field of an enum variant; ``name`` is the index text for tuple variants."""

    name: str
    ty: Type


@dataclass(frozen=True)
class FunctionSignature:
    """
    Display-ready pieces of a function declaration.

    ``parameters`` holds the full parameter text (``x: i32``, ``&self``)
    and ``parameter_names`` the bare pattern names in the same order,
    receiver included.
    """

    name: str
    parameters: tuple[str, ...] = ()
    parameter_names: tuple[str, ...] = ()
    has_self_param: bool = False
    ret_type: str | None = None
    visibility: str | None = None
    generic_parameters: tuple[str, ...] = ()
    where_predicates: tuple[str, ...] = ()

    def __str__(self) -> str:
        return function_label(self)


def attribute_path(attribute: str) -> str | None:
    """Return the path of an attribute's text, e.g. ``deprecated``."""
    m = _ATTRIBUTE_PATH.match(attribute)
    if not m:
        return None
    return m.group(1)


def has_attribute(attributes: tuple[str, ...], key: str) -> bool:
    """Check whether any attribute's path equals ``key``."""
    return any(attribute_path(attr) == key for attr in attributes)


@dataclass(frozen=True)
class _Attributed:
    docs: str | None = field(default=None, kw_only=True)
    attributes: tuple[str, ...] = field(default=(), kw_only=True)

    @property
    def is_deprecated(self) -> bool:
        return has_attribute(self.attributes, "deprecated")


# ===== Candidate kinds =====


@dataclass(frozen=True)
class FieldCandidate(_Attributed):
    """A named struct field reached through a receiver."""

    name: str
    ty: Type


@dataclass(frozen=True)
class TupleFieldCandidate:
    """A positional field (``.0``, ``.1``) of a tuple or tuple struct."""

    index: int
    ty: Type


@dataclass(frozen=True)
class FunctionCandidate(_Attributed):
    signature: FunctionSignature

    @property
    def name(self) -> str:
        return self.signature.name

    @property
    def has_self_param(self) -> bool:
        return self.signature.has_self_param


@dataclass(frozen=True)
class MacroCandidate(_Attributed):
    """
    A macro definition.

    Procedural macros have no source the renderer could label, so
    ``is_proc_macro`` candidates are never rendered.
    """

    name: str | None
    is_proc_macro: bool = False

    @property
    def is_exported(self) -> bool:
        return has_attribute(self.attributes, "macro_export")


@dataclass(frozen=True)
class ConstCandidate(_Attributed):
    name: str | None
    ty: str | None = None
    visibility: str | None = None


@dataclass(frozen=True)
class StaticCandidate(_Attributed):
    name: str
    ty: str | None = None
    is_mut: bool = False


@dataclass(frozen=True)
class TypeAliasCandidate(_Attributed):
    name: str | None
    generic_params: tuple[GenericParam, ...] = ()
    target: str | None = None
    visibility: str | None = None

    def has_non_default_type_params(self) -> bool:
        return any(not p.has_default for p in self.generic_params)


@dataclass(frozen=True)
class AdtCandidate(_Attributed):
    """A struct, union or enum."""

    name: str
    adt_kind: AdtKind = AdtKind.STRUCT
    generic_params: tuple[GenericParam, ...] = ()

    def has_non_default_type_params(self) -> bool:
        return any(not p.has_default for p in self.generic_params)


@dataclass(frozen=True)
class TraitCandidate(_Attributed):
    name: str


@dataclass(frozen=True)
class BuiltinTypeCandidate:
    name: str


@dataclass(frozen=True)
class EnumVariantCandidate(_Attributed):
    name: str
    kind: StructKind = StructKind.UNIT
    fields: tuple[VariantField, ...] = ()


@dataclass(frozen=True)
class LocalCandidate:
    """A local binding (let, parameter, pattern)."""

    name: str
    ty: Type


@dataclass(frozen=True)
class ModuleCandidate:
    name: str
    docs: str | None = None


@dataclass(frozen=True)
class GenericParamCandidate:
    name: str


@dataclass(frozen=True)
class SelfTypeCandidate:
    """``Self`` inside an ADT definition or an impl block."""

    name: str = "Self"


@dataclass(frozen=True)
class UnknownCandidate:
    """A name in scope whose definition could not be resolved."""

    name: str


# Candidates a name in scope can resolve to.
ScopeDef = Union[
    FunctionCandidate,
    MacroCandidate,
    ConstCandidate,
    StaticCandidate,
    TypeAliasCandidate,
    AdtCandidate,
    TraitCandidate,
    BuiltinTypeCandidate,
    EnumVariantCandidate,
    LocalCandidate,
    ModuleCandidate,
    GenericParamCandidate,
    SelfTypeCandidate,
    UnknownCandidate,
]

Candidate = Union[FieldCandidate, TupleFieldCandidate, ScopeDef]
