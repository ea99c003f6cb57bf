"""
Classification and resolution of `$ref` pointers.

Pointers come in three flavours:

- `#/components/schemas/Pet` - local pointer into the components registry
- `#/definitions/Address` - local looking pointer carried over from a fragment of
  an external file; searched for in every loaded external document
- `common.yaml#/definitions/Address` - external pointer into a sibling file

Resolved fragments declaring `type: object` become shared components and the use
site is rewritten to `#/components/schemas/<key>`. Any other fragment is copied
inline at every use site.
"""

import copy

from loguru import logger

from openapi_bundler.errors import (
    CyclicReferenceError,
    UnresolvedComponentReference,
    UnresolvedExternalReference,
    UnresolvedLocalReference,
)
from openapi_bundler.nodes import is_object_shaped, lookup_fragment, make_ref, ref_key
from openapi_bundler.walker import walk

__all__ = ["PointerResolver"]


class PointerResolver:
    """Resolves pointers against one components registry and one external file cache."""

    def __init__(self, components, cache):
        # type: (dict[str, object], ExternalFileCache) -> None
        """
        :param components: Live components registry, extended as components are promoted
        :param cache: External file cache of the current bundle run
        """
        self.components = components
        self.cache = cache
        self._inlining = set()  # type: set[str]

    def resolve(self, pointer):
        # type: (str) -> object
        """
        Return the node that replaces a reference to `pointer`.

        :param pointer: Value of a `$ref` entry
        :return: A `{"$ref": "#/components/schemas/<key>"}` node or an inline fragment copy
        :raises UnresolvedReferenceError: If the referenced key cannot be located
        """
        if pointer.startswith("#"):
            key = ref_key(pointer)
            if "components" in pointer:
                return self._resolve_component(pointer, key)
            return self._resolve_local(pointer, key)
        return self._resolve_external(pointer)

    def _resolve_component(self, pointer, key):
        # type: (str, str) -> object
        fragment = self.components.get(key)
        if fragment is None:
            raise UnresolvedComponentReference(pointer, key, "not present in components/schemas")
        if is_object_shaped(fragment):
            return make_ref(key)
        return copy.deepcopy(fragment)

    def _resolve_local(self, pointer, key):
        # type: (str, str) -> object
        fragment = None
        # First loaded document wins when several define the same top-level key
        for document in self.cache.documents():
            fragment = document.get(key)
            if fragment is not None:
                break

        if fragment is None:
            # Nested paths such as `#/definitions/Address` are only followed when no top-level key matches
            for document in self.cache.documents():
                fragment = lookup_fragment(document, pointer[1:])
                if fragment is not None:
                    break

        if fragment is None:
            raise UnresolvedLocalReference(pointer, key, "not found in any referenced file")
        if is_object_shaped(fragment):
            self._register(key, fragment, pointer)
            return make_ref(key)
        return copy.deepcopy(fragment)

    def _resolve_external(self, pointer):
        # type: (str) -> object
        if "#" not in pointer:
            raise UnresolvedExternalReference(pointer, pointer, "external pointers require a '#' fragment")

        relative_path, fragment_path = pointer.split("#", 1)
        key = ref_key(pointer)
        document = self.cache.load_file(relative_path)
        fragment = lookup_fragment(document, fragment_path)
        if fragment is None:
            raise UnresolvedExternalReference(pointer, key, f"not found in {relative_path}")

        if is_object_shaped(fragment):
            self._register(key, fragment, pointer)
            return make_ref(key)

        if pointer in self._inlining:
            raise CyclicReferenceError(pointer)
        fragment = copy.deepcopy(fragment)
        self._inlining.add(pointer)
        try:
            walk(fragment, self.resolve)
        finally:
            self._inlining.discard(pointer)
        return fragment

    def _register(self, key, fragment, pointer):
        # type: (str, dict, str) -> None
        """Promote an object-shaped fragment into the components registry."""
        existing = self.components.get(key)
        if existing is not None and existing is not fragment:
            logger.debug(f"Component '{key}' replaced by fragment from {pointer}")
        self.components[key] = fragment
