"""Operations on keyword mappings.

The extractor only needs a handful of capabilities from the mapping that
holds the keyword arguments: membership, lookup, deletion by key, size
and the list of keys in insertion order. They are dispatched on the type
of the mapping, so that a missing mapping (None) behaves as an empty one.
"""

from ovld import ovld

from .utils import UNSPECIFIED


@ovld
def kw_has(mapping: dict, key):
    """Return whether the mapping has an entry for key."""
    return key in mapping


@ovld  # noqa: F811
def kw_has(mapping: type(None), key):
    return False


@ovld
def kw_lookup(mapping: dict, key):
    """Return the value for key, or UNSPECIFIED if there is none."""
    return mapping.get(key, UNSPECIFIED)


@ovld  # noqa: F811
def kw_lookup(mapping: type(None), key):
    return UNSPECIFIED


@ovld
def kw_delete(mapping: dict, key):
    """Delete key from the mapping if it is there, return its value.

    UNSPECIFIED is returned if the key was not present.
    """
    return mapping.pop(key, UNSPECIFIED)


@ovld  # noqa: F811
def kw_delete(mapping: type(None), key):
    return UNSPECIFIED


@ovld
def kw_size(mapping: dict):
    """Return the number of entries in the mapping."""
    return len(mapping)


@ovld  # noqa: F811
def kw_size(mapping: type(None)):
    return 0


@ovld
def kw_keys(mapping: dict):
    """Return the keys of the mapping, in insertion order."""
    return list(mapping)


@ovld  # noqa: F811
def kw_keys(mapping: type(None)):
    return []


__all__ = [
    "kw_delete",
    "kw_has",
    "kw_keys",
    "kw_lookup",
    "kw_size",
]
