"""Documentation run entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from avro_doc_generator.document_writing import OutputFormat


@dataclass(frozen=True)
class GenerationRequest:
    """Input contract for one documentation run.

    ``None`` values fall back to the configuration file, then to defaults.
    """

    schema_path: str
    output_prefix: str
    config_path: str | None = None
    output_format: OutputFormat | None = None
    title: str | None = None
    include_root: bool | None = None


@dataclass(frozen=True)
class GenerationOutcome:
    """Output contract for one completed run."""

    output_path: Path
    record_names: tuple[str, ...]

    @property
    def record_count(self) -> int:
        return len(self.record_names)
