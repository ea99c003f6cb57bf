"""
Validate command for the OpenAPI bundler CLI.

Validates an OpenAPI definition without bundling it.
"""

from pathlib import Path

import typer

from openapi_bundler.cli.common import console, report_validation
from openapi_bundler.settings import bundler_settings

__all__ = ["validate_command"]


def validate_command(
    directory: Path = typer.Option(..., "--dir", "-d", help="Directory containing the OpenAPI definition"),
    file: str | None = typer.Option(None, "--file", "-f", help="Definition file name (default: openapi.yaml)"),
):
    # type: (...) -> None
    """
    Validate an OpenAPI definition file.

    Example:
        openapi-bundler validate --dir specs
        openapi-bundler validate --dir specs --file petstore.yaml
    """
    path = directory / (file or bundler_settings.input_file)
    if not path.exists():
        console.print(f"[red]Error: Definition file not found: {path}[/red]")
        raise typer.Exit(code=1)

    if not report_validation(path):
        raise typer.Exit(code=1)
