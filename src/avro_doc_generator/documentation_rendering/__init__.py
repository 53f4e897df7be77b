"""Documentation rendering exports."""

from .document_models import (
    COLUMN_LABELS,
    MISSING_DOCUMENTATION,
    Document,
    DocumentBlock,
    FieldRow,
)
from .document_renderer import render_document, render_field_type, render_record_block

__all__ = [
    "COLUMN_LABELS",
    "MISSING_DOCUMENTATION",
    "Document",
    "DocumentBlock",
    "FieldRow",
    "render_document",
    "render_field_type",
    "render_record_block",
]
