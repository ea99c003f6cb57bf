"""
Exceptions raised while bundling an OpenAPI document.

All resolution failures are fatal for a bundle run. They propagate to the caller
unchanged so that no partially resolved document is ever written.
"""

__all__ = [
    "BundleError",
    "UnresolvedReferenceError",
    "UnresolvedComponentReference",
    "UnresolvedLocalReference",
    "UnresolvedExternalReference",
    "DocumentLoadError",
    "ExternalFileLoadError",
    "CyclicReferenceError",
]


class BundleError(Exception):
    """Base class for all bundling errors."""


class UnresolvedReferenceError(BundleError):
    """A `$ref` key could not be found where its pointer says it lives."""

    context = "reference"

    def __init__(self, pointer, ref_key, detail=None):
        # type: (str, str, str|None) -> None
        self.pointer = pointer
        self.ref_key = ref_key
        message = f"Could not resolve {self.context} reference for key '{ref_key}' (pointer '{pointer}')"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class UnresolvedComponentReference(UnresolvedReferenceError):
    """Key missing from the components registry."""

    context = "components"


class UnresolvedLocalReference(UnresolvedReferenceError):
    """Key missing from every loaded external document."""

    context = "local"


class UnresolvedExternalReference(UnresolvedReferenceError):
    """Key missing from the referenced external document."""

    context = "external"


class DocumentLoadError(BundleError):
    """A YAML/JSON document could not be read or parsed."""

    def __init__(self, path, reason):
        # type: (object, str) -> None
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load document {path}: {reason}")


class ExternalFileLoadError(DocumentLoadError):
    """A referenced external file could not be read or parsed."""


class CyclicReferenceError(BundleError):
    """An inline expansion re-entered a pointer that is still being expanded."""

    def __init__(self, pointer):
        # type: (str) -> None
        self.pointer = pointer
        super().__init__(f"Cyclic reference detected while inlining '{pointer}'")
