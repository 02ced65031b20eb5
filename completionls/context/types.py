from enum import Enum


class CompletionItemKind(Enum):
    """Presentation kind of a rendered completion item."""

    FIELD = "field"
    MODULE = "module"
    STRUCT = "struct"
    ENUM = "enum"
    ENUM_VARIANT = "enum_variant"
    CONST = "const"
    STATIC = "static"
    TRAIT = "trait"
    TYPE_ALIAS = "type_alias"
    BUILTIN_TYPE = "builtin_type"
    TYPE_PARAM = "type_param"
    BINDING = "binding"
    MACRO = "macro"
    FUNCTION = "function"
    METHOD = "method"
    UNKNOWN = "unknown"


class CompletionScore(Enum):
    """
    Coarse relevance tier of an item.

    Members compare by rank, so ``max()`` and sorting pick the
    stronger match.
    """

    TYPE_MATCH = 1            # display type equals the expected type
    TYPE_AND_NAME_MATCH = 2   # ...and the name equals the expected name

    def __lt__(self, other: "CompletionScore") -> bool:
        if not isinstance(other, CompletionScore):
            return NotImplemented
        return self.value < other.value


class StructKind(Enum):
    """Shape of a struct-like item's field list."""

    RECORD = "record"   # Foo { x: i32 }
    TUPLE = "tuple"     # Foo(i32)
    UNIT = "unit"       # Foo


class AdtKind(Enum):
    """Algebraic data type flavour."""

    STRUCT = "struct"
    UNION = "union"
    ENUM = "enum"
