"""
Loading of YAML/JSON documents and the per-run cache of external files.

External references are resolved against one base directory for the whole run.
Every distinct relative path is read and parsed at most once.
"""

from pathlib import Path

import yaml
from loguru import logger

from openapi_bundler.errors import DocumentLoadError, ExternalFileLoadError

__all__ = ["load_document", "ExternalFileCache"]


def load_document(path):
    # type: (str|Path) -> dict
    """
    Read and parse a YAML or JSON document.

    JSON is valid YAML, so both formats go through `yaml.safe_load`.

    :param path: Path of the file to load
    :return: Parsed top-level mapping
    :raises DocumentLoadError: If the file is missing, malformed or not a mapping
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            document = yaml.safe_load(f)
    except OSError as e:
        raise DocumentLoadError(path, e.strerror or str(e)) from e
    except yaml.YAMLError as e:
        raise DocumentLoadError(path, f"invalid YAML/JSON ({e})") from e

    if not isinstance(document, dict):
        raise DocumentLoadError(path, f"top-level value must be a mapping, got {type(document).__name__}")
    return document


class ExternalFileCache:
    """Memoizes parsed external documents keyed by their relative path."""

    def __init__(self, base_dir):
        # type: (str|Path) -> None
        """
        Create an empty cache.

        :param base_dir: Directory that relative reference paths are resolved against
        """
        self.base_dir = Path(base_dir)
        self._documents = {}  # type: dict[str, dict]

    def load_file(self, relative_path):
        # type: (str) -> dict
        """
        Return the parsed document for a relative path, loading it on first use.

        :param relative_path: Path relative to the base directory (e.g. `schemas/common.yaml`)
        :return: Cached parsed document
        :raises ExternalFileLoadError: If the file cannot be read or parsed
        """
        document = self._documents.get(relative_path)
        if document is None:
            full_path = self.base_dir / relative_path
            logger.debug(f"Loading external reference file {full_path}")
            try:
                document = load_document(full_path)
            except DocumentLoadError as e:
                raise ExternalFileLoadError(full_path, e.reason) from e
            self._documents[relative_path] = document
        return document

    def documents(self):
        # type: () -> list[dict]
        """Return the cached documents in the order they were first loaded."""
        return list(self._documents.values())

    def __contains__(self, relative_path):
        # type: (str) -> bool
        return relative_path in self._documents

    def __len__(self):
        # type: () -> int
        return len(self._documents)
