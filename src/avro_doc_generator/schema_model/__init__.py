"""Schema model exports."""

from .type_nodes import NAMED_KINDS, PRIMITIVE_KINDS, Field, TypeKind, TypeNode

__all__ = [
    "Field",
    "NAMED_KINDS",
    "PRIMITIVE_KINDS",
    "TypeKind",
    "TypeNode",
]
