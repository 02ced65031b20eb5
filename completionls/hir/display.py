"""
One-line declaration labels used as completion ``detail`` text.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from completionls.hir.candidates import (
        ConstCandidate,
        FunctionSignature,
        GenericParam,
        MacroCandidate,
        TypeAliasCandidate,
    )


def _with_visibility(visibility: str | None, text: str) -> str:
    if visibility:
        return f"{visibility} {text}"
    return text


def function_label(signature: FunctionSignature) -> str:
    """
    Render a signature as ``pub fn name<T>(x: T) -> T`` plus an optional
    ``where`` clause on following lines.
    """
    label = _with_visibility(signature.visibility, f"fn {signature.name}")
    if signature.generic_parameters:
        label += "<" + ", ".join(signature.generic_parameters) + ">"
    label += "(" + ", ".join(signature.parameters) + ")"
    if signature.ret_type:
        label += f" -> {signature.ret_type}"
    if signature.where_predicates:
        label += "\nwhere " + ",\n      ".join(signature.where_predicates)
    return label


def const_label(const: ConstCandidate) -> str:
    label = _with_visibility(const.visibility, f"const {const.name}")
    if const.ty:
        label += f": {const.ty}"
    return label


def _generics_label(params: tuple[GenericParam, ...]) -> str:
    if not params:
        return ""
    rendered = [
        f"{p.name} = {p.default}" if p.has_default else p.name for p in params
    ]
    return "<" + ", ".join(rendered) + ">"


def type_label(alias: TypeAliasCandidate) -> str:
    label = _with_visibility(
        alias.visibility, f"type {alias.name}{_generics_label(alias.generic_params)}"
    )
    if alias.target:
        label += f" = {alias.target}"
    return label


def macro_label(macro: MacroCandidate, name: str) -> str:
    prefix = "#[macro_export]\n" if macro.is_exported else ""
    return f"{prefix}macro_rules! {name}"
