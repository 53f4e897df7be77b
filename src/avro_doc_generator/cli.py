"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click

from avro_doc_generator.configuration import (
    DEFAULT_CONFIG_FILENAME,
    ConfigurationError,
    parse_output_format,
    write_placeholder_configuration,
)
from avro_doc_generator.document_writing import OutputFormat
from avro_doc_generator.generation_run import (
    DocumentationRunError,
    GenerationRequest,
    execute_documentation_run,
)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
_FORMAT_CHOICES = tuple(output_format.value for output_format in OutputFormat) + ("md",)


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="avro-doc-generator")
@click.option(
    "--log-level",
    type=click.Choice(_LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Logging verbosity written to stderr.",
)
def cli(log_level: str) -> None:
    """Generate flattened record documentation from Avro schemas."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command(name="generate")
@click.option(
    "-s",
    "--schema",
    "schema_path",
    required=True,
    type=click.Path(path_type=str),
    help="Avro schema file",
)
@click.option(
    "-o",
    "--output",
    "output_prefix",
    required=True,
    type=click.Path(path_type=str),
    help="Output path prefix; the format suffix is appended",
)
@click.option(
    "--format",
    "format_name",
    required=False,
    type=click.Choice(_FORMAT_CHOICES, case_sensitive=False),
    help="Output document format [default: html, or the configured format]",
)
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional YAML configuration file",
)
@click.option("--title", required=False, help="Document title")
@click.option(
    "--include-root/--no-include-root",
    default=None,
    help="Also document the root record itself",
)
# pylint: disable=too-many-arguments
def generate(
    schema_path: str,
    output_prefix: str,
    format_name: str | None,
    config_path: str | None,
    title: str | None,
    include_root: bool | None,
) -> None:
    """Write documentation for every record referenced by the schema root."""
    try:
        outcome = execute_documentation_run(
            GenerationRequest(
                schema_path=schema_path,
                output_prefix=output_prefix,
                config_path=config_path,
                output_format=parse_output_format(format_name, "--format")
                if format_name
                else None,
                title=title,
                include_root=include_root,
            )
        )
    except (DocumentationRunError, ConfigurationError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(f"Extracted {outcome.record_count} record schemas.")
    click.echo(str(outcome.output_path))


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a YAML configuration template with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), prog_name="avro-doc-generator", standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
