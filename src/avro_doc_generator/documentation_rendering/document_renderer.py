"""Record documentation rendering service."""

from __future__ import annotations

from collections.abc import Iterable

from avro_doc_generator.schema_model import TypeKind, TypeNode

from .document_models import MISSING_DOCUMENTATION, Document, DocumentBlock, FieldRow


def render_document(records: Iterable[TypeNode], *, title: str | None = None) -> Document:
    """Build one documentation block per record, keeping the given order."""
    return Document(title=title, blocks=tuple(render_record_block(record) for record in records))


def render_record_block(record: TypeNode) -> DocumentBlock:
    """Build the heading and field table for *record*."""
    rows = tuple(
        FieldRow(
            name=field.name,
            type_text=render_field_type(field.schema),
            documentation=field.doc if field.doc is not None else MISSING_DOCUMENTATION,
        )
        for field in record.fields
    )
    return DocumentBlock(heading=record.full_name, rows=rows, description=record.doc)


def render_field_type(node: TypeNode) -> str:
    """Return a deterministic textual description of a field type.

    Named types render as their full name and are never expanded, which
    keeps rendering finite for recursive records.
    """
    if node.kind.is_named:
        return node.full_name
    if node.kind is TypeKind.ARRAY and node.items is not None:
        return f"array<{render_field_type(node.items)}>"
    if node.kind is TypeKind.MAP and node.values is not None:
        return f"map<{render_field_type(node.values)}>"
    if node.kind is TypeKind.UNION:
        return f"union[{', '.join(render_field_type(member) for member in node.types)}]"
    if node.logical_type:
        return f"{node.kind.value} ({node.logical_type})"
    return node.kind.value
