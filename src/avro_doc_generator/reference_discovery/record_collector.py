"""Reachable record discovery service."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from avro_doc_generator.schema_model import TypeNode

from .reference_extractor import extract_record_references

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class RecordSet:
    """Ordered, duplicate-free record types keyed by full name."""

    records: tuple[TypeNode, ...] = ()

    def __iter__(self) -> Iterator[TypeNode]:
        return iter(self.records)

    def __len__(self) -> int:
        return len(self.records)

    def __contains__(self, full_name: object) -> bool:
        return full_name in self.full_names

    @property
    def full_names(self) -> tuple[str, ...]:
        return tuple(record.full_name for record in self.records)


def collect_referenced_records(root: TypeNode) -> RecordSet:
    """Return every record reachable from the fields of *root*.

    Records are listed in first-discovery order of a depth-first walk over
    fields in declaration order. A record is marked as seen when it is
    discovered, before its own fields are walked, so cyclic schemas
    terminate. The root itself is only listed when a reachable field refers
    back to it.
    """
    collected: list[TypeNode] = []
    seen: set[str] = set()
    pending: list[Iterator[TypeNode]] = [_field_references(root)]

    while pending:
        discovered = next(pending[-1], None)
        if discovered is None:
            pending.pop()
            continue
        if discovered.full_name in seen:
            continue
        seen.add(discovered.full_name)
        collected.append(discovered)
        _LOGGER.debug("Discovered record %s", discovered.full_name)
        pending.append(_field_references(discovered))

    return RecordSet(records=tuple(collected))


def _field_references(record: TypeNode) -> Iterator[TypeNode]:
    for field in record.fields:
        yield from extract_record_references(field.schema)
