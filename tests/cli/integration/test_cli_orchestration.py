"""CLI orchestration integration tests."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner
from avro_doc_generator.cli import cli, main
from openpyxl import load_workbook


def _sample_schema_path() -> Path:
    return Path(__file__).resolve().parents[3] / "samples" / "order-schema.avsc"


def _write_order_schema(tmp_path: Path) -> Path:
    schema = {
        "type": "record",
        "name": "Order",
        "fields": [
            {
                "name": "customer",
                "type": {
                    "type": "record",
                    "name": "Customer",
                    "fields": [{"name": "name", "type": "string", "doc": "Display name."}],
                },
            },
            {
                "name": "items",
                "type": {
                    "type": "array",
                    "items": {
                        "type": "record",
                        "name": "LineItem",
                        "fields": [
                            {
                                "name": "product",
                                "type": {
                                    "type": "record",
                                    "name": "Product",
                                    "fields": [{"name": "sku", "type": "string"}],
                                },
                            }
                        ],
                    },
                },
            },
        ],
    }
    path = tmp_path / "order.avsc"
    path.write_text(json.dumps(schema), encoding="utf-8")
    return path


def test_generate_command_writes_html_blocks_in_discovery_order(tmp_path: Path) -> None:
    runner = CliRunner()
    schema_path = _write_order_schema(tmp_path)
    output_prefix = tmp_path / "order-docs"

    result = runner.invoke(
        cli,
        ["generate", "--schema", str(schema_path), "--output", str(output_prefix)],
    )

    assert result.exit_code == 0
    assert "Extracted 3 record schemas." in result.output
    output_path = tmp_path / "order-docs.html"
    assert str(output_path.resolve()) in result.output
    html = output_path.read_text(encoding="utf-8")
    positions = [html.index(f"<h3>{name}</h3>") for name in ("Customer", "LineItem", "Product")]
    assert positions == sorted(positions)
    assert html.count("<table>") == 3
    assert "<td>Display name.</td>" in html
    assert "<td>None provided.</td>" in html
    assert "<h3>Order</h3>" not in html


def test_generate_command_supports_markdown_and_title(tmp_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(
        cli,
        [
            "generate",
            "-s",
            str(_sample_schema_path()),
            "-o",
            str(tmp_path / "order"),
            "--format",
            "md",
            "--title",
            "Shop records",
            "--include-root",
        ],
    )

    assert result.exit_code == 0
    markdown = (tmp_path / "order.md").read_text(encoding="utf-8")
    assert markdown.startswith("# Shop records\n")
    assert "## com.example.shop.Customer" in markdown
    assert "| `email` | union[null, string] | None provided. |" in markdown
    assert "| `price` | bytes (decimal) | None provided. |" in markdown
    assert "| `notes` | map&lt;string&gt; | None provided. |" in markdown


def test_generate_command_writes_workbook_with_root_included(tmp_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(
        cli,
        [
            "generate",
            "-s",
            str(_sample_schema_path()),
            "-o",
            str(tmp_path / "order"),
            "--format",
            "xlsx",
            "--include-root",
        ],
    )

    assert result.exit_code == 0
    assert "Extracted 4 record schemas." in result.output
    workbook = load_workbook(tmp_path / "order.xlsx")
    assert workbook.sheetnames[1:] == [
        "com.example.shop.Order",
        "com.example.shop.Customer",
        "com.example.shop.LineItem",
        "com.example.shop.Product",
    ]


def test_generate_command_reads_configuration_file(tmp_path: Path) -> None:
    runner = CliRunner()
    config_path = tmp_path / "docgen.yaml"
    config_path.write_text("output:\n  format: markdown\n", encoding="utf-8")

    result = runner.invoke(
        cli,
        [
            "generate",
            "-s",
            str(_sample_schema_path()),
            "-o",
            str(tmp_path / "order"),
            "--config",
            str(config_path),
        ],
    )

    assert result.exit_code == 0
    assert (tmp_path / "order.md").exists()


def test_generate_command_returns_error_for_missing_schema(tmp_path: Path) -> None:
    runner = CliRunner()
    missing = tmp_path / "missing.avsc"

    result = runner.invoke(
        cli,
        ["generate", "--schema", str(missing), "--output", str(tmp_path / "out")],
    )

    assert result.exit_code != 0
    assert f"{missing} does not exist." in str(result.exception)
    assert not (tmp_path / "out.html").exists()


def test_generate_config_command_writes_scaffold_with_default_name(tmp_path: Path) -> None:
    runner = CliRunner()
    with runner.isolated_filesystem(temp_dir=str(tmp_path)):
        result = runner.invoke(cli, ["generate-config"])
        output_path = Path("docgen.yaml").resolve()

        assert result.exit_code == 0
        assert output_path.exists()
        content = output_path.read_text(encoding="utf-8")
        assert "output:" in content
        assert "documentation:" in content
        assert str(output_path) in result.output


def test_generate_config_refuses_to_overwrite(tmp_path: Path, capsys) -> None:
    existing = tmp_path / "docgen.yaml"
    existing.write_text("output: {}\n", encoding="utf-8")

    exit_code = main(["generate-config", "--output", str(existing)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "already exists" in captured.err
    assert existing.read_text(encoding="utf-8") == "output: {}\n"
