"""
OpenAPI bundler CLI.

Command-line interface for bundling and validating multi-file OpenAPI definitions.
"""

import typer

import openapi_bundler
from openapi_bundler.cli.bundle import bundle_command
from openapi_bundler.cli.validate import validate_command
from openapi_bundler.cli.common import console

__all__ = ["app", "main"]


app = typer.Typer(
    name="openapi-bundler",
    help="Bundle and validate multi-file OpenAPI definitions",
    no_args_is_help=True,
)

# Register commands
app.command(name="bundle")(bundle_command)
app.command(name="validate")(validate_command)


@app.command()
def version():
    # type: () -> None
    """Show version information."""
    console.print(f"openapi-bundler version {openapi_bundler.__version__}")


def main():
    # type: () -> None
    """CLI entry point."""
    app()
