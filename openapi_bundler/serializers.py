"""
Serialization of bundled documents to JSON and YAML files.

The YAML output follows conventional OpenAPI formatting: block style, original
key order, no `---` document start marker, no line wrapping and quotes only where
YAML requires them.
"""

import json
import sys
from pathlib import Path

import yaml
from loguru import logger

from openapi_bundler.settings import OUTPUT_FORMATS

__all__ = ["BundleDumper", "to_json", "to_yaml", "write_bundle"]


class BundleDumper(yaml.SafeDumper):
    """YAML dumper that never emits anchors and aliases for repeated nodes."""

    def ignore_aliases(self, data):
        return True


def to_json(document):
    # type: (dict) -> str
    """Render a document as pretty-printed JSON with a trailing newline."""
    # Dates parsed from YAML have no JSON type
    return json.dumps(document, indent=2, ensure_ascii=False, default=str) + "\n"


def to_yaml(document):
    # type: (dict) -> str
    """Render a document as block-style YAML."""
    return yaml.dump(
        document,
        Dumper=BundleDumper,
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
        explicit_start=False,
        width=sys.maxsize,
    )


def write_bundle(document, output_dir, output_file, output_format):
    # type: (dict, str|Path, str, str) -> list[Path]
    """
    Write a bundled document as `<output_file>.json` and/or `<output_file>.yaml`.

    :param document: Bundled document
    :param output_dir: Target directory (created if missing)
    :param output_file: File name without extension
    :param output_format: "json", "yaml" or "both" (case-insensitive)
    :return: Paths of the written files, JSON first
    """
    output_format = output_format.lower()
    if output_format not in OUTPUT_FORMATS:
        raise ValueError(f"Unsupported output format '{output_format}'. Supported: {', '.join(OUTPUT_FORMATS)}")

    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    renderers = []
    if output_format in ("json", "both"):
        renderers.append(("json", to_json))
    if output_format in ("yaml", "both"):
        renderers.append(("yaml", to_yaml))

    written = []
    for extension, render in renderers:
        target = output_dir / f"{output_file}.{extension}"
        logger.info(f"Writing bundled {extension.upper()} to {target}")
        # LF line endings on every platform
        with open(target, "w", encoding="utf-8", newline="\n") as f:
            f.write(render(document))
        written.append(target)
    return written
