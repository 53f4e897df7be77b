"""Documentation run use-case service."""

from __future__ import annotations

import logging
from pathlib import Path

from avro_doc_generator.configuration import (
    ConfigurationError,
    GeneratorSettings,
    load_configuration,
)
from avro_doc_generator.document_writing import OutputWriteError, write_document
from avro_doc_generator.documentation_rendering import render_document
from avro_doc_generator.reference_discovery import RecordSet, collect_referenced_records
from avro_doc_generator.schema_model import TypeKind, TypeNode
from avro_doc_generator.schema_parsing import SchemaParseError, load_schema_file

from .run_contracts import GenerationOutcome, GenerationRequest

_LOGGER = logging.getLogger(__name__)


class DocumentationRunError(Exception):
    """Raised when a documentation run cannot be completed."""


class InputNotFoundError(DocumentationRunError):
    """Raised when the schema input file does not exist."""


def execute_documentation_run(request: GenerationRequest) -> GenerationOutcome:
    """Parse the schema, collect referenced records and write their documentation."""
    schema_path = Path(request.schema_path)
    if not schema_path.exists():
        raise InputNotFoundError(f"{request.schema_path} does not exist.")

    settings = _load_settings(request.config_path)
    _LOGGER.info("Reading Avro schema from %s", schema_path)
    root = _load_root_record(schema_path)

    include_root = (
        request.include_root
        if request.include_root is not None
        else settings.documentation.include_root
    )
    records = select_documented_records(root, include_root=include_root)
    _LOGGER.info("Extracted %d record schemas.", len(records))

    document = render_document(
        records,
        title=request.title or settings.output.title or root.full_name,
    )
    output_format = request.output_format or settings.output.output_format
    try:
        output_path = write_document(document, request.output_prefix, output_format)
    except OutputWriteError as exc:
        raise DocumentationRunError(str(exc)) from exc

    return GenerationOutcome(output_path=output_path, record_names=records.full_names)


def select_documented_records(root: TypeNode, *, include_root: bool = False) -> RecordSet:
    """Collect the records referenced from *root*, optionally led by *root* itself."""
    collected = collect_referenced_records(root)
    if not include_root or root.full_name in collected:
        return collected
    return RecordSet(records=(root, *collected.records))


def _load_settings(config_path: str | None) -> GeneratorSettings:
    if config_path is None:
        return GeneratorSettings.defaults()
    try:
        return load_configuration(config_path)
    except ConfigurationError as exc:
        raise DocumentationRunError(str(exc)) from exc


def _load_root_record(schema_path: Path) -> TypeNode:
    try:
        root = load_schema_file(schema_path)
    except (SchemaParseError, OSError, UnicodeDecodeError) as exc:
        raise DocumentationRunError(f"Failed to read schema {schema_path}: {exc}") from exc
    if root.kind is not TypeKind.RECORD:
        raise DocumentationRunError(
            f"Avro schema root must be a record, found {root.kind.value}: {schema_path}"
        )
    return root
