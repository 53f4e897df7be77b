"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "docgen.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Configuration template for avro-doc-generator.
# Every setting is optional; command line options take precedence.

output:
  # Output document format (html, markdown or xlsx).
  format: html
  # Document title; defaults to the root record full name.
  # title: "<OPTIONAL>"

documentation:
  # Also document the root record itself, ahead of the records it references.
  include_root: false
"""


def build_placeholder_configuration() -> str:
    """Build a YAML configuration template with defaults and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
