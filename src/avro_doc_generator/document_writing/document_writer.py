"""Documentation output writer service."""

from __future__ import annotations

import logging
import re
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape
from openpyxl import Workbook
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from avro_doc_generator.documentation_rendering import Document, DocumentBlock

from .constants import MAX_SHEET_TITLE_LENGTH, OVERVIEW_SHEET_NAME, OutputFormat

_LOGGER = logging.getLogger(__name__)
_INVALID_SHEET_CHARACTERS = re.compile(r"[\[\]:*?/\\]")

_TEMPLATE_ENV = Environment(
    loader=FileSystemLoader(Path(__file__).resolve().parent / "templates"),
    autoescape=select_autoescape(enabled_extensions=("html.j2",), default_for_string=False),
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=True,
    undefined=StrictUndefined,
)
_TEMPLATE_NAMES = {
    OutputFormat.HTML: "document.html.j2",
    OutputFormat.MARKDOWN: "document.md.j2",
}


class OutputWriteError(Exception):
    """Raised when the output document cannot be written."""


def _markdown_text(value: str) -> str:
    # CommonMark reads "<string>" in "map<string>" as an inline HTML tag.
    return value.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def _markdown_cell(value: str) -> str:
    escaped = _markdown_text(value).replace("|", r"\|")
    return escaped.replace("\r\n", "\n").replace("\n", "<br>")


_TEMPLATE_ENV.filters["md_text"] = _markdown_text
_TEMPLATE_ENV.filters["md_cell"] = _markdown_cell


def resolve_output_path(output_prefix: Path | str, output_format: OutputFormat) -> Path:
    """Append the format suffix to *output_prefix*."""
    prefix = Path(output_prefix)
    return prefix.with_name(prefix.name + output_format.suffix)


def render_text_document(document: Document, output_format: OutputFormat) -> str:
    """Render *document* as HTML or Markdown text."""
    template_name = _TEMPLATE_NAMES.get(output_format)
    if template_name is None:
        raise ValueError(f"{output_format.value} is not a text output format.")
    return _TEMPLATE_ENV.get_template(template_name).render(document=document)


def write_document(
    document: Document,
    output_prefix: Path | str,
    output_format: OutputFormat = OutputFormat.HTML,
) -> Path:
    """Write *document* next to *output_prefix* and return the resolved path.

    Args:
      document: Rendered documentation blocks.
      output_prefix: Output path without the format suffix.
      output_format: Format deciding both the renderer and the suffix.

    Returns:
      The resolved path of the written file.

    Raises:
      OutputWriteError: If the destination cannot be created or written.
    """
    output_path = resolve_output_path(output_prefix, output_format)
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        if output_format is OutputFormat.XLSX:
            _build_workbook(document).save(output_path)
        else:
            rendered = render_text_document(document, output_format)
            with output_path.open("w", encoding="utf-8") as handle:
                handle.write(rendered)
    except OSError as exc:
        raise OutputWriteError(f"Failed to write documentation to {output_path}: {exc}") from exc
    _LOGGER.info("Wrote %d documentation blocks to %s", len(document.blocks), output_path)
    return output_path.resolve()


def _build_workbook(document: Document) -> Workbook:
    workbook = Workbook()
    overview = workbook.active
    if overview is None:
        raise RuntimeError("Workbook active sheet is not available.")
    assert isinstance(overview, Worksheet)
    overview.title = OVERVIEW_SHEET_NAME

    used_titles = {OVERVIEW_SHEET_NAME}
    overview.cell(row=1, column=1, value=document.title or "Records")
    overview["A1"].style = "Headline 1"
    overview.cell(row=2, column=1, value="Record")
    overview.cell(row=2, column=2, value="Sheet")
    for row_index, block in enumerate(document.blocks, start=3):
        sheet_title = _unique_sheet_title(block.heading, used_titles)
        overview.cell(row=row_index, column=1, value=block.heading)
        overview.cell(row=row_index, column=2, value=sheet_title)
        _write_block_sheet(workbook.create_sheet(sheet_title), block, document.column_labels)
    overview.column_dimensions["A"].width = 40
    overview.column_dimensions["B"].width = MAX_SHEET_TITLE_LENGTH + 4
    return workbook


def _write_block_sheet(sheet, block: DocumentBlock, column_labels: tuple[str, ...]) -> None:
    sheet.cell(row=1, column=1, value=block.heading)
    sheet["A1"].style = "Headline 1"
    header_row = 2
    if block.description:
        sheet.cell(row=2, column=1, value=block.description)
        header_row = 3
    for column_index, label in enumerate(column_labels, start=1):
        sheet.cell(row=header_row, column=column_index, value=label)
        sheet.column_dimensions[get_column_letter(column_index)].width = 30
    for row_index, row in enumerate(block.rows, start=header_row + 1):
        sheet.cell(row=row_index, column=1, value=row.name)
        sheet.cell(row=row_index, column=2, value=row.type_text)
        sheet.cell(row=row_index, column=3, value=row.documentation)


def _unique_sheet_title(heading: str, used_titles: set[str]) -> str:
    base = _INVALID_SHEET_CHARACTERS.sub("_", heading)
    if len(base) > MAX_SHEET_TITLE_LENGTH:
        # Keep the short name, which sits at the end of a full name.
        base = base[-MAX_SHEET_TITLE_LENGTH:]
    candidate = base
    counter = 2
    while candidate.lower() in {title.lower() for title in used_titles}:
        suffix = f"~{counter}"
        candidate = base[: MAX_SHEET_TITLE_LENGTH - len(suffix)] + suffix
        counter += 1
    used_titles.add(candidate)
    return candidate
