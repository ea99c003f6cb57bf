"""
Fixpoint driver that bundles one OpenAPI document.

A bundle run walks the full document once and then re-walks snapshots of the
components registry a fixed number of times. Each pass resolves references that
the previous pass pulled in with newly promoted components, so `max_passes`
bounds the supported depth of reference-to-reference nesting. The bound is fixed
rather than a convergence check to stay finite on cyclic schemas.
"""

from pathlib import Path

from loguru import logger

from openapi_bundler.errors import BundleError
from openapi_bundler.loader import ExternalFileCache, load_document
from openapi_bundler.resolver import PointerResolver
from openapi_bundler.settings import bundler_settings
from openapi_bundler.walker import walk

__all__ = ["BundleSession", "bundle_document", "bundle_file"]


class BundleSession:
    """
    State of a single bundle run.

    Owns the components registry and the external file cache. Create a new session
    for every document; state is never shared between runs.
    """

    def __init__(self, base_dir, max_passes=None):
        # type: (str|Path, int|None) -> None
        """
        :param base_dir: Directory that external reference paths are relative to
        :param max_passes: Extra passes over the registry (defaults to settings)
        """
        if max_passes is None:
            max_passes = bundler_settings.max_passes
        if max_passes < 0:
            raise ValueError(f"max_passes must be >= 0, got {max_passes}")

        self.base_dir = Path(base_dir)
        self.max_passes = max_passes
        self.components = {}  # type: dict[str, object]
        self.cache = ExternalFileCache(self.base_dir)
        self.resolver = PointerResolver(self.components, self.cache)

    def bundle(self, document):
        # type: (dict) -> dict
        """
        Resolve all references of `document` in place.

        :param document: Parsed root document
        :return: The same document, fully resolved, with the registry merged into
                 components/schemas
        :raises BundleError: If a reference cannot be resolved
        """
        if not isinstance(document, dict):
            raise BundleError(f"Root document must be a mapping, got {type(document).__name__}")

        schemas = _schemas_section(document, create=False)
        if schemas:
            self.components.update(schemas)
        logger.debug(f"Seeded components registry with {len(self.components)} schemas")

        seeded = dict(schemas) if schemas else {}
        walk(document, self.resolver.resolve)
        # Aliases replaced in the document's own schemas section must not be undone by the final merge
        if schemas:
            self._write_back(seeded, schemas)

        for number in range(1, self.max_passes + 1):
            logger.debug(f"Resolving components, pass {number} of {self.max_passes}")
            before = dict(self.components)
            snapshot = dict(before)
            walk(snapshot, self.resolver.resolve)
            self._write_back(before, snapshot)

        if self.components:
            _schemas_section(document, create=True).update(self.components)
        logger.info(
            f"Bundled document with {len(self.components)} components from {len(self.cache)} external files"
        )
        return document

    def _write_back(self, before, walked):
        # type: (dict, dict) -> None
        """Adopt top-level replacements of `walked` unless the live registry changed meanwhile."""
        for key, value in walked.items():
            original = before.get(key)
            if value is not original and self.components.get(key) is original:
                self.components[key] = value


def _schemas_section(document, create):
    # type: (dict, bool) -> dict|None
    """
    Return the components/schemas mapping of a document, optionally creating it.

    :raises BundleError: If components or components/schemas exists but is not a mapping
    """
    components = document.get("components")
    if components is None:
        if not create:
            return None
        components = document["components"] = {}
    elif not isinstance(components, dict):
        raise BundleError(f"components must be a mapping, got {type(components).__name__}")

    schemas = components.get("schemas")
    if schemas is None:
        if not create:
            return None
        schemas = components["schemas"] = {}
    elif not isinstance(schemas, dict):
        raise BundleError(f"components/schemas must be a mapping, got {type(schemas).__name__}")
    return schemas


def bundle_document(document, base_dir, max_passes=None):
    # type: (dict, str|Path, int|None) -> dict
    """
    Bundle an already parsed document.

    :param document: Parsed root document, mutated in place
    :param base_dir: Directory that external reference paths are relative to
    :param max_passes: Extra passes over the components registry
    :return: The bundled document
    """
    return BundleSession(base_dir, max_passes=max_passes).bundle(document)


def bundle_file(path, max_passes=None):
    # type: (str|Path, int|None) -> dict
    """
    Load and bundle a root document file.

    External references are resolved relative to the directory of `path`.

    :param path: Path of the root YAML/JSON document
    :param max_passes: Extra passes over the components registry
    :return: The bundled document
    :raises DocumentLoadError: If the root document cannot be loaded
    """
    path = Path(path)
    logger.info(f"Loading OpenAPI document from {path}")
    document = load_document(path)
    return bundle_document(document, path.parent, max_passes=max_passes)
