"""Record reference extraction for single field types."""

from __future__ import annotations

from avro_doc_generator.schema_model import TypeKind, TypeNode


def extract_record_references(node: TypeNode) -> tuple[TypeNode, ...]:
    """Return the record types *node* denotes, in declaration order.

    Records are found directly, as the items of an array, as the values of a
    map, or among union members. Arrays and maps are unwrapped one level
    only, so an array of arrays of records yields nothing.
    """
    if node.kind is TypeKind.RECORD:
        return (node,)
    if node.kind is TypeKind.ARRAY and _is_record(node.items):
        return (node.items,)
    if node.kind is TypeKind.MAP and _is_record(node.values):
        return (node.values,)
    if node.kind is TypeKind.UNION:
        references: list[TypeNode] = []
        for member in node.types:
            references.extend(extract_record_references(member))
        return tuple(references)
    return ()


def _is_record(node: TypeNode | None) -> bool:
    return node is not None and node.kind is TypeKind.RECORD
