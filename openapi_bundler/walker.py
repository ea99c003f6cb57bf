"""
Recursive walker that replaces reference nodes in place.

Wherever a mapping entry or sequence element is a single-key `{"$ref": pointer}`
mapping, the node is replaced by whatever the resolve callback returns and the
replacement is walked as well, so references nested inside freshly inlined
fragments are resolved in the same pass.
"""

from loguru import logger

from openapi_bundler.errors import CyclicReferenceError
from openapi_bundler.nodes import ref_pointer

__all__ = ["walk"]


def walk(node, resolve, expanding=()):
    # type: (dict|list, Callable[[str], object], tuple[str, ...]) -> None
    """
    Resolve all reference nodes below `node`, mutating it in place.

    Keys and indexes are taken from a snapshot before values are replaced, so the
    container is never resized while it is iterated.

    :param node: Mapping or sequence to walk
    :param resolve: Callback mapping a pointer to its replacement node
    :param expanding: Pointers whose inline expansions enclose `node`
    :raises CyclicReferenceError: If an inline expansion contains its own pointer
    """
    if isinstance(node, dict):
        for key in list(node):
            node[key] = _visit(node[key], resolve, expanding)
    elif isinstance(node, list):
        for index in range(len(node)):
            node[index] = _visit(node[index], resolve, expanding)


def _visit(value, resolve, expanding):
    # type: (object, Callable[[str], object], tuple[str, ...]) -> object
    """Replace a reference node by its resolution and walk the result."""
    pointer = ref_pointer(value)
    while pointer is not None:
        if pointer in expanding:
            raise CyclicReferenceError(pointer)
        logger.debug(f"Resolving pointer {pointer}")
        value = resolve(pointer)
        expanding = expanding + (pointer,)
        # A replacement pointing elsewhere is resolved in turn; one pointing at itself is settled
        next_pointer = ref_pointer(value)
        pointer = next_pointer if next_pointer != pointer else None

    if isinstance(value, (dict, list)):
        walk(value, resolve, expanding)
    return value
