from __future__ import annotations

from collections.abc import Iterable

from completionls.context.types import StructKind
from completionls.hir.candidates import VariantField


def variant_detail(kind: StructKind, fields: Iterable[VariantField]) -> str:
    """
    Render an enum variant's field list for the ``detail`` column.

    Tuple and unit variants list types only, ``(i32, i32)`` / ``()``;
    record variants list names too, ``{ x: i32, y: i32 }``.
    """
    if kind is StructKind.RECORD:
        inner = ", ".join(f"{f.name}: {f.ty.display}" for f in fields)
        return "{ " + inner + " }"
    return "(" + ", ".join(f.ty.display for f in fields) + ")"
