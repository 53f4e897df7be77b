"""Schema parsing exports."""

from .avsc_parser import SchemaParseError, load_schema_file, parse_schema_text

__all__ = [
    "SchemaParseError",
    "load_schema_file",
    "parse_schema_text",
]
