"""
Bundle command for the OpenAPI bundler CLI.

Resolves all references of a multi-file OpenAPI definition and writes one
self-contained JSON and/or YAML file.
"""

from pathlib import Path

import typer
from rich.markup import escape

from openapi_bundler.bundler import bundle_file
from openapi_bundler.cli.common import configure_logging, console, report_validation
from openapi_bundler.errors import BundleError
from openapi_bundler.serializers import write_bundle
from openapi_bundler.settings import bundler_settings

__all__ = ["bundle_command"]


def bundle_command(
    directory: Path = typer.Option(..., "--dir", "-d", help="Directory containing the files to bundle"),
    file: str | None = typer.Option(None, "--file", "-f", help="Root definition file name (default: openapi.yaml)"),
    output_format: str | None = typer.Option(None, "--output-format", "-o", help="Output format: yaml, json or both"),
    output_file: str | None = typer.Option(
        None, "--output-file", "-of", help="Output file name without extension"
    ),
    output_dir: Path | None = typer.Option(
        None, "--output-dir", "-od", help="Output directory (default: input directory)"
    ),
    max_passes: int | None = typer.Option(None, "--max-passes", min=0, help="Extra resolution passes (default: 3)"),
    no_validate: bool = typer.Option(False, "--no-validate", help="Skip OpenAPI validation of input and output"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
):
    # type: (...) -> None
    """
    Bundle an OpenAPI definition into a single file.

    The input is validated first, then all $ref pointers are resolved and the
    result is written and validated again. Validation problems are reported but
    never stop bundling.

    Examples:

        openapi-bundler bundle --dir specs

        openapi-bundler bundle --dir specs --file petstore.yaml -o both --output-dir dist
    """
    try:
        settings = bundler_settings.override(
            {
                "input_file": file,
                "output_format": output_format,
                "output_file": output_file,
                "max_passes": max_passes,
                "validate_output": False if no_validate else None,
                "debug": True if debug else None,
            }
        )
    except ValueError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=2)

    configure_logging(settings.debug)

    source = directory / settings.input_file
    if not source.exists():
        console.print(f"[red]Error: Definition file not found: {source}[/red]")
        raise typer.Exit(code=1)

    if settings.validate_output:
        report_validation(source)

    console.print(f"Bundling API definition <{settings.input_file}> from directory <{directory}>")
    try:
        document = bundle_file(source, max_passes=settings.max_passes)
    except BundleError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)

    target_dir = output_dir or directory
    written = write_bundle(document, target_dir, settings.output_file, settings.output_format)

    if settings.validate_output:
        for path in written:
            report_validation(path)

    label = "YAML & JSON" if settings.output_format == "both" else settings.output_format.upper()
    console.print(f"[green]Bundling completed. Output directory <{target_dir}>, in file format {label}[/green]")
