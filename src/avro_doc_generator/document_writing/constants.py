"""Shared document writing constants."""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """Supported output document formats."""

    HTML = "html"
    MARKDOWN = "markdown"
    XLSX = "xlsx"

    @property
    def suffix(self) -> str:
        return _SUFFIXES[self]


_SUFFIXES = {
    OutputFormat.HTML: ".html",
    OutputFormat.MARKDOWN: ".md",
    OutputFormat.XLSX: ".xlsx",
}

DEFAULT_OUTPUT_FORMAT = OutputFormat.HTML
OVERVIEW_SHEET_NAME = "Overview"
MAX_SHEET_TITLE_LENGTH = 31
