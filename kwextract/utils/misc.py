"""Miscellaneous utilities."""

from typing import Iterable


class Named:
    """A named object.

    This class can be used to construct objects with a name that will be used
    for the string representation. Instances are compared by identity, which
    makes them suitable as sentinels that no user value can be equal to.

    """

    def __init__(self, name):
        """Construct a named object.

        Arguments:
            name: The name of this object.

        """
        self.name = name

    def __repr__(self):
        """Return the object's name."""
        return self.name


UNSPECIFIED = Named("UNSPECIFIED")


def list_str(lst: Iterable, sep=", "):
    """Return string representation of a sequence of keys.

    Unlike the default string representation, this calls `str` instead of
    `repr` on each element and does not add brackets.

    """
    return sep.join(str(elem) for elem in lst)


__consolidate__ = True
__all__ = [
    "Named",
    "UNSPECIFIED",
    "list_str",
]
