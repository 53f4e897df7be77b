"""Schema type tree entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class TypeKind(str, Enum):
    """Avro type kinds a schema node can denote."""

    RECORD = "record"
    ENUM = "enum"
    FIXED = "fixed"
    ARRAY = "array"
    MAP = "map"
    UNION = "union"
    NULL = "null"
    BOOLEAN = "boolean"
    INT = "int"
    LONG = "long"
    FLOAT = "float"
    DOUBLE = "double"
    BYTES = "bytes"
    STRING = "string"

    @property
    def is_primitive(self) -> bool:
        return self in PRIMITIVE_KINDS

    @property
    def is_named(self) -> bool:
        return self in NAMED_KINDS


PRIMITIVE_KINDS = frozenset(
    {
        TypeKind.NULL,
        TypeKind.BOOLEAN,
        TypeKind.INT,
        TypeKind.LONG,
        TypeKind.FLOAT,
        TypeKind.DOUBLE,
        TypeKind.BYTES,
        TypeKind.STRING,
    }
)
NAMED_KINDS = frozenset({TypeKind.RECORD, TypeKind.ENUM, TypeKind.FIXED})


@dataclass(frozen=True, eq=False)
class TypeNode:  # pylint: disable=too-many-instance-attributes
    """One node of a parsed schema.

    Record nodes may be shared between several parents (and reference
    themselves), so nodes compare by identity and ``fields`` is left out of
    ``repr``.
    """

    kind: TypeKind
    name: str | None = None
    namespace: str | None = None
    doc: str | None = None
    fields: list[Field] = field(default_factory=list, repr=False)
    items: TypeNode | None = None
    values: TypeNode | None = None
    types: tuple[TypeNode, ...] = ()
    symbols: tuple[str, ...] = ()
    size: int | None = None
    logical_type: str | None = None

    @property
    def full_name(self) -> str:
        """Namespace-qualified name for named types, the type name otherwise."""
        if self.kind.is_named and self.name:
            return f"{self.namespace}.{self.name}" if self.namespace else self.name
        return self.kind.value


@dataclass(frozen=True)
class Field:
    """One declared record field."""

    name: str
    schema: TypeNode = field(repr=False)
    doc: str | None = None
    default: Any = None
