"""Tests for OpenAPI validation of definition files."""

import json

from openapi_bundler.validation import validate_file


def test_validate_valid_file(write_yaml, petstore):
    # type: (Callable, dict) -> None
    path = write_yaml("openapi.yaml", petstore)
    result = validate_file(path)
    assert result.valid is True
    assert result.path == path
    assert "is valid" in result.message


def test_validate_json_file(tmp_path, petstore):
    # type: (Path, dict) -> None
    path = tmp_path / "openapi.json"
    path.write_text(json.dumps(petstore), encoding="utf-8")
    assert validate_file(path).valid is True


def test_validate_invalid_file_does_not_raise(write_yaml, petstore):
    # type: (Callable, dict) -> None
    """Test that an invalid definition is reported rather than raised."""
    del petstore["info"]
    path = write_yaml("openapi.yaml", petstore)
    result = validate_file(path)
    assert result.valid is False
    assert "failed validation" in result.message


def test_validate_missing_file(tmp_path):
    # type: (Path) -> None
    result = validate_file(tmp_path / "missing.yaml")
    assert result.valid is False
    assert "could not be loaded" in result.message



def test_validate_modular_spec_with_external_refs(modular_spec):
    # type: (Path) -> None
    """Test that relative external references are resolved by the validator."""
    assert validate_file(modular_spec).valid is True
