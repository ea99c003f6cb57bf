"""Tests for JSON and YAML rendering of bundled documents."""

import datetime
import json

import pytest
import yaml

from openapi_bundler.serializers import to_json, to_yaml, write_bundle


@pytest.fixture
def document():
    # type: () -> dict
    shared = {"type": "string", "enum": ["a", "b"]}
    return {
        "openapi": "3.0.3",
        "info": {"title": "Ünïcode API", "version": "1.0.0", "description": "word " * 60},
        "paths": {"/a": {"get": {"parameters": [{"name": "x", "in": "query", "schema": shared}]}}},
        "components": {"schemas": {"Shared": shared, "Empty": {}}},
    }


def test_to_yaml_has_no_document_start_marker(document):
    # type: (dict) -> None
    assert not to_yaml(document).startswith("---")


def test_to_yaml_block_style_and_key_order(document):
    # type: (dict) -> None
    output = to_yaml(document)
    lines = output.splitlines()
    assert lines[0] == "openapi: 3.0.3"
    assert lines[1] == "info:"
    assert "  title: Ünïcode API" in lines
    assert [line for line in lines if not line.startswith(" ")] == ["openapi: 3.0.3", "info:", "paths:", "components:"]


def test_to_yaml_never_emits_aliases(document):
    # type: (dict) -> None
    """Test that nodes shared between use sites are written out in full."""
    output = to_yaml(document)
    assert "&id" not in output
    assert "*id" not in output
    assert output.count("enum:") == 2


def test_to_yaml_does_not_split_long_lines(document):
    # type: (dict) -> None
    output = to_yaml(document)
    description_lines = [line for line in output.splitlines() if "description:" in line]
    assert len(description_lines) == 1
    assert description_lines[0].count("word") == 60


def test_to_yaml_round_trips(document):
    # type: (dict) -> None
    assert yaml.safe_load(to_yaml(document)) == document


def test_to_json_pretty_printed(document):
    # type: (dict) -> None
    output = to_json(document)
    assert output.startswith('{\n  "openapi": "3.0.3"')
    assert output.endswith("}\n")
    assert "Ünïcode" in output
    assert json.loads(output) == document


def test_to_json_renders_dates_as_strings():
    # type: () -> None
    output = to_json({"example": datetime.date(2024, 1, 31)})
    assert json.loads(output) == {"example": "2024-01-31"}


def test_write_bundle_yaml(tmp_path, document):
    # type: (Path, dict) -> None
    written = write_bundle(document, tmp_path, "openapi.bundled", "yaml")
    assert written == [tmp_path / "openapi.bundled.yaml"]
    assert yaml.safe_load(written[0].read_text(encoding="utf-8")) == document


def test_write_bundle_both_creates_output_dir(tmp_path, document):
    # type: (Path, dict) -> None
    output_dir = tmp_path / "dist" / "api"
    written = write_bundle(document, output_dir, "bundle", "BOTH")
    assert written == [output_dir / "bundle.json", output_dir / "bundle.yaml"]
    assert json.loads(written[0].read_text(encoding="utf-8")) == document
    assert b"\r\n" not in written[1].read_bytes()


def test_write_bundle_rejects_unknown_format(tmp_path, document):
    # type: (Path, dict) -> None
    with pytest.raises(ValueError, match="Unsupported output format"):
        write_bundle(document, tmp_path, "bundle", "xml")
    assert list(tmp_path.iterdir()) == []
