"""
OpenAPI validation of input and bundled files.

Validation only reports. A failed validation never changes or aborts bundling.
"""

from pathlib import Path
from typing import NamedTuple

from jsonschema.exceptions import ValidationError
from loguru import logger
from openapi_spec_validator import validate
from openapi_spec_validator.versions.exceptions import OpenAPIVersionNotFound
from referencing.exceptions import Unresolvable

from openapi_bundler.errors import DocumentLoadError
from openapi_bundler.loader import load_document

__all__ = ["ValidationResult", "validate_file"]


class ValidationResult(NamedTuple):
    path: Path
    valid: bool
    message: str


def validate_file(path):
    # type: (str|Path) -> ValidationResult
    """
    Validate an OpenAPI definition file with openapi-spec-validator.

    The file URI is passed as base URI so relative external references in
    unbundled documents are validated as well.

    :param path: Path of a YAML or JSON OpenAPI document
    :return: Validation outcome with a human readable message
    """
    path = Path(path)
    try:
        spec = load_document(path)
        validate(spec, base_uri=path.resolve().as_uri())
    except DocumentLoadError as e:
        message = f"Definition file <{path.name}> in directory <{path.parent}> could not be loaded: {e.reason}"
        logger.warning(message)
        return ValidationResult(path, False, message)
    except (ValidationError, OpenAPIVersionNotFound, Unresolvable, OSError) as e:
        message = f"Definition file <{path.name}> in directory <{path.parent}> failed validation: {e}"
        logger.warning(message)
        return ValidationResult(path, False, message)

    message = f"Definition file <{path.name}> in directory <{path.parent}> is valid"
    logger.info(message)
    return ValidationResult(path, True, message)
