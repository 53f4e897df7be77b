"""Document writing exports."""

from .constants import DEFAULT_OUTPUT_FORMAT, OVERVIEW_SHEET_NAME, OutputFormat
from .document_writer import (
    OutputWriteError,
    render_text_document,
    resolve_output_path,
    write_document,
)

__all__ = [
    "DEFAULT_OUTPUT_FORMAT",
    "OVERVIEW_SHEET_NAME",
    "OutputFormat",
    "OutputWriteError",
    "render_text_document",
    "resolve_output_path",
    "write_document",
]
