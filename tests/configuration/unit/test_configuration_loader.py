"""Configuration loader tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from avro_doc_generator.configuration import (
    ConfigurationError,
    GeneratorSettings,
    load_configuration,
    parse_output_format,
)
from avro_doc_generator.document_writing import OutputFormat


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "docgen.yaml"
    path.write_text(text, encoding="utf-8")
    return path


def test_load_configuration_reads_all_sections(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        """
output:
  format: markdown
  title: "  Order events  "
documentation:
  include_root: true
""",
    )

    settings = load_configuration(path)

    assert settings.path == path
    assert settings.output.output_format is OutputFormat.MARKDOWN
    assert settings.output.title == "Order events"
    assert settings.documentation.include_root is True


def test_empty_configuration_falls_back_to_defaults(tmp_path: Path) -> None:
    settings = load_configuration(_write(tmp_path, ""))
    defaults = GeneratorSettings.defaults()

    assert settings.output == defaults.output
    assert settings.documentation == defaults.documentation
    assert settings.output.output_format is OutputFormat.HTML
    assert settings.documentation.include_root is False


def test_missing_configuration_file_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="Configuration file not found"):
        load_configuration(tmp_path / "absent.yaml")


@pytest.mark.parametrize(
    ("text", "message"),
    [
        ("- just\n- a list\n", "root must be a mapping"),
        ("output: [html]\n", "'output' must be a mapping"),
        ("output:\n  format: pdf\n", "output.format must be one of"),
        ("output:\n  format: 3\n", "output.format must be a string"),
        ("output:\n  title: 5\n", "output.title must be a string"),
        ("documentation:\n  include_root: 'yes'\n", "include_root must be true or false"),
        ("extras: {}\n", "Unknown configuration sections: extras"),
        ("output: {format: [unclosed\n", "Failed to parse configuration file"),
    ],
)
def test_invalid_configuration_values_raise(tmp_path: Path, text: str, message: str) -> None:
    with pytest.raises(ConfigurationError, match=message):
        load_configuration(_write(tmp_path, text))


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("html", OutputFormat.HTML),
        ("Markdown", OutputFormat.MARKDOWN),
        ("md", OutputFormat.MARKDOWN),
        (" XLSX ", OutputFormat.XLSX),
    ],
)
def test_parse_output_format_normalizes_names(raw: str, expected: OutputFormat) -> None:
    assert parse_output_format(raw) is expected
