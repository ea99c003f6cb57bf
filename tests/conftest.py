"""Test fixtures for OpenAPI bundler testing."""

import copy

import pytest
import yaml
from loguru import logger


@pytest.fixture
def write_yaml(tmp_path):
    # type: (Path) -> Callable[[str, object], Path]
    """Return a helper that writes YAML files relative to tmp_path."""

    def _write(relative_path, data):
        # type: (str, object) -> Path
        path = tmp_path / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(yaml.safe_dump(data, sort_keys=False), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def petstore():
    # type: () -> dict
    """Minimal valid OpenAPI document that is already fully local."""
    return {
        "openapi": "3.0.3",
        "info": {"title": "Petstore", "version": "1.0.0"},
        "paths": {
            "/pets": {
                "get": {
                    "responses": {
                        "200": {
                            "description": "A pet",
                            "content": {
                                "application/json": {"schema": {"$ref": "#/components/schemas/Pet"}},
                            },
                        }
                    }
                }
            }
        },
        "components": {
            "schemas": {
                "Pet": {"type": "object", "properties": {"name": {"type": "string"}}},
            }
        },
    }


@pytest.fixture
def modular_spec(tmp_path, write_yaml, petstore):
    # type: (Path, Callable, dict) -> Path
    """Write a multi-file OpenAPI definition and return the root document path."""
    root = copy.deepcopy(petstore)
    root["paths"]["/owners"] = {
        "get": {
            "parameters": [
                {"name": "status", "in": "query", "schema": {"$ref": "common.yaml#/Status"}},
            ],
            "responses": {
                "200": {
                    "description": "An owner",
                    "content": {"application/json": {"schema": {"$ref": "owner.yaml#/Owner"}}},
                }
            },
        }
    }
    write_yaml(
        "owner.yaml",
        {
            "Owner": {
                "type": "object",
                "properties": {
                    "name": {"type": "string"},
                    "address": {"$ref": "common.yaml#/definitions/Address"},
                },
            }
        },
    )
    write_yaml(
        "common.yaml",
        {
            "Status": {"type": "string", "enum": ["active", "inactive"]},
            "definitions": {
                "Address": {
                    "type": "object",
                    "properties": {"city": {"type": "string"}, "country": {"$ref": "#/Country"}},
                }
            },
            "Country": {"type": "string", "minLength": 2, "maxLength": 2},
        },
    )
    return write_yaml("openapi.yaml", root)


@pytest.fixture
def captured_logs():
    # type: () -> StringIO
    """Capture loguru messages for the duration of a test."""
    from io import StringIO

    output = StringIO()
    handler_id = logger.add(output, format="{level} {message}", level="DEBUG")
    yield output
    logger.remove(handler_id)
