"""
Helpers for the parsed document tree.

Documents are plain PyYAML output: mappings are dicts, sequences are lists and
everything else is a scalar. The functions here give the `$ref` related checks
a single definition shared by the walker and the resolver.
"""

__all__ = [
    "REF",
    "SCHEMAS_POINTER",
    "ref_pointer",
    "ref_key",
    "is_object_shaped",
    "make_ref",
    "lookup_fragment",
]


REF = "$ref"
SCHEMAS_POINTER = "#/components/schemas/"


def ref_pointer(value):
    # type: (object) -> str|None
    """
    Return the pointer of a reference node.

    Only a mapping with exactly one entry keyed `$ref` and a string value counts as
    a reference. Mappings with sibling keys are ordinary mappings.

    :param value: Any node of the document tree
    :return: The pointer string or None
    """
    if isinstance(value, dict) and len(value) == 1 and REF in value:
        pointer = value[REF]
        if isinstance(pointer, str):
            return pointer
    return None


def ref_key(pointer):
    # type: (str) -> str
    """
    Extract the reference key (final path segment) of a pointer.

    :param pointer: Pointer such as `#/components/schemas/Pet` or `common.yaml#/Address`
    :return: The final segment, e.g. `Pet` or `Address`
    """
    fragment = pointer.split("#", 1)[-1]
    return fragment.rsplit("/", 1)[-1]


def is_object_shaped(fragment):
    # type: (object) -> bool
    """Check whether a fragment declares `type: object` at its top level."""
    return isinstance(fragment, dict) and str(fragment.get("type")) == "object"


def make_ref(key):
    # type: (str) -> dict
    """Build a reference node pointing into the shared schemas section."""
    return {REF: f"{SCHEMAS_POINTER}{key}"}


def lookup_fragment(document, fragment):
    # type: (dict, str) -> object|None
    """
    Find the node a pointer fragment designates inside a document.

    The `/` separated segments are followed through nested mappings first. If that
    path does not exist the top-level entry named by the final segment is used.

    :param document: Parsed document (top-level mapping)
    :param fragment: Fragment after `#`, e.g. `/definitions/Address`
    :return: The referenced node or None if not found
    """
    segments = [segment for segment in fragment.split("/") if segment]
    if not segments:
        return None

    current = document  # type: object
    for segment in segments:
        if not isinstance(current, dict) or segment not in current:
            current = None
            break
        current = current[segment]

    if current is None and len(segments) > 1:
        current = document.get(segments[-1])
    return current
