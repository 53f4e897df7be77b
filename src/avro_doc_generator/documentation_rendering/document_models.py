"""Documentation rendering entities."""

from __future__ import annotations

from dataclasses import dataclass

COLUMN_LABELS: tuple[str, ...] = ("Field Name", "Field Type", "Documentation")
MISSING_DOCUMENTATION = "None provided."


@dataclass(frozen=True)
class FieldRow:
    """One row of a record's field table."""

    name: str
    type_text: str
    documentation: str


@dataclass(frozen=True)
class DocumentBlock:
    """Heading and field table for one record."""

    heading: str
    rows: tuple[FieldRow, ...]
    description: str | None = None


@dataclass(frozen=True)
class Document:
    """Ordered documentation blocks ready to be written."""

    title: str | None
    blocks: tuple[DocumentBlock, ...]

    @property
    def column_labels(self) -> tuple[str, ...]:
        return COLUMN_LABELS
