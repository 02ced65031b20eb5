from __future__ import annotations


# Evaluation order; on equal votes the later style wins.
MACRO_BRACES: tuple[tuple[str, str], ...] = (
    (" {", "}"),
    ("[", "]"),
    ("(", ")"),
)

_VOTE_INDEX = {"{": 0, "[": 1, "(": 2}


def _is_ident_char(c: str) -> bool:
    return c == "_" or (c.isascii() and c.isalnum())


def guess_macro_braces(macro_name: str, docs: str) -> tuple[str, str]:
    """
    Guess the bracket style of a macro from invocations in its docs.

    Every ``name!`` occurrence that is not part of a longer identifier
    votes for the bracket following the bang (whitespace skipped).
    Curly braces come back with a leading space: ``foo! {}``.
    """
    votes = [0, 0, 0]
    if macro_name:
        idx = docs.find(macro_name)
        while idx != -1:
            before = docs[:idx]
            after = docs[idx + len(macro_name):]
            if after.startswith("!") and not (before and _is_ident_char(before[-1])):
                rest = after[1:].lstrip()
                if rest and rest[0] in _VOTE_INDEX:
                    votes[_VOTE_INDEX[rest[0]]] += 1
            idx = docs.find(macro_name, idx + 1)

    best = 0
    for i, vote in enumerate(votes):
        if vote >= votes[best]:
            best = i
    return MACRO_BRACES[best]
