from __future__ import annotations

from completionls.context.completion_context import CompletionContext
from completionls.context.types import CompletionScore
from completionls.hir.candidates import Type


def _active_expectation(ctx: CompletionContext) -> tuple[str, str] | None:
    """
    Name and type display text the cursor position is known to require.

    A record field initializer takes precedence over an enclosing call
    argument. An initializer whose field did not resolve yields nothing;
    it does not fall back to the call argument.
    """
    if ctx.record_field_syntax is not None:
        resolved = ctx.record_field_syntax.resolved
        if resolved is None:
            return None
        return resolved.name, resolved.ty.display
    if ctx.active_parameter is not None:
        return ctx.active_parameter.name, ctx.active_parameter.ty
    return None


def compute_score(
    ctx: CompletionContext, ty: Type, name: str
) -> CompletionScore | None:
    """
    Rank a candidate of type ``ty`` named ``name`` against the active
    expectation.

    Types are compared by their display text, not structurally.
    """
    expectation = _active_expectation(ctx)
    if expectation is None:
        return None

    active_name, active_type = expectation
    if active_type != ty.display:
        return None

    if active_name == name:
        return CompletionScore.TYPE_AND_NAME_MATCH
    return CompletionScore.TYPE_MATCH
