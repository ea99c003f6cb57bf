"""Bundle multi-file OpenAPI definitions into a single self-contained document."""

from importlib import metadata

__package_name__ = "openapi-bundler"
__version__ = metadata.version(__package_name__)

from openapi_bundler.settings import BundlerSettings, bundler_settings  # noqa: E402
from openapi_bundler.bundler import BundleSession, bundle_document, bundle_file  # noqa: E402
from openapi_bundler.errors import BundleError  # noqa: E402

__all__ = [
    "BundleSession",
    "bundle_document",
    "bundle_file",
    "BundleError",
    "BundlerSettings",
    "bundler_settings",
]
