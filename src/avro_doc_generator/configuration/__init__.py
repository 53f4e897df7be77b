"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import ConfigurationError, load_configuration, parse_output_format
from .runtime_settings import DocumentationSettings, GeneratorSettings, OutputSettings

__all__ = [
    "DocumentationSettings",
    "GeneratorSettings",
    "OutputSettings",
    "ConfigurationError",
    "load_configuration",
    "parse_output_format",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
