"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from avro_doc_generator.document_writing import DEFAULT_OUTPUT_FORMAT, OutputFormat


@dataclass(frozen=True)
class OutputSettings:
    """Output document settings."""

    output_format: OutputFormat = DEFAULT_OUTPUT_FORMAT
    title: str | None = None


@dataclass(frozen=True)
class DocumentationSettings:
    """Settings deciding which records get documented."""

    include_root: bool = False


@dataclass(frozen=True)
class GeneratorSettings:
    """Top-level configuration aggregate."""

    path: Path | None
    output: OutputSettings
    documentation: DocumentationSettings

    @classmethod
    def defaults(cls) -> GeneratorSettings:
        return cls(path=None, output=OutputSettings(), documentation=DocumentationSettings())
