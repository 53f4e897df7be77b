"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from avro_doc_generator.document_writing import DEFAULT_OUTPUT_FORMAT, OutputFormat

from .runtime_settings import DocumentationSettings, GeneratorSettings, OutputSettings


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> GeneratorSettings:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    unknown_sections = sorted(set(parsed) - {"output", "documentation"})
    if unknown_sections:
        raise ConfigurationError(f"Unknown configuration sections: {', '.join(unknown_sections)}")

    return GeneratorSettings(
        path=path,
        output=_parse_output_section(parsed.get("output")),
        documentation=_parse_documentation_section(parsed.get("documentation")),
    )


def parse_output_format(value: Any, field_name: str = "output.format") -> OutputFormat:
    """Normalize a format name such as ``html`` or ``Markdown``."""
    raw = _require_non_empty_string(value, field_name).lower()
    if raw == "md":
        return OutputFormat.MARKDOWN
    try:
        return OutputFormat(raw)
    except ValueError as exc:
        choices = ", ".join(output_format.value for output_format in OutputFormat)
        raise ConfigurationError(f"{field_name} must be one of: {choices}.") from exc


def _parse_output_section(value: Any) -> OutputSettings:
    section = _optional_mapping(value, "output")
    format_value = section.get("format")
    output_format = (
        DEFAULT_OUTPUT_FORMAT if format_value is None else parse_output_format(format_value)
    )
    title = _optional_string(section.get("title"), "output.title")
    return OutputSettings(output_format=output_format, title=title)


def _parse_documentation_section(value: Any) -> DocumentationSettings:
    section = _optional_mapping(value, "documentation")
    include_root = _optional_bool(
        section.get("include_root"), "documentation.include_root", default=False
    )
    return DocumentationSettings(include_root=include_root)


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None


def _optional_bool(value: Any, field_name: str, *, default: bool) -> bool:
    if value is None:
        return default
    if not isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be true or false.")
    return value
