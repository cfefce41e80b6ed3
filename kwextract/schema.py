"""Declaration of the keyword arguments a function expects."""

from typing import Sequence, Tuple

from .options import get_option
from .utils import SchemaError


class KeywordSchema:
    """Keyword names expected by a function.

    Attributes:
        required: Names that must be given, in declaration order.
        optional: Names that may be given, in declaration order.
        rest_allowed: Whether keys that are neither required nor optional
            may be present. They are left in the mapping.

    """

    __slots__ = ("required", "optional", "rest_allowed", "_names")

    def __init__(
        self,
        required: Sequence[str] = (),
        optional: Sequence[str] = (),
        rest_allowed: bool = False,
        *,
        check=None,
    ):
        """Initialize a KeywordSchema.

        Arguments:
            required: The required key names.
            optional: The optional key names.
            rest_allowed: Whether unknown keys are tolerated.
            check: Whether to verify that names are unique strings.
                Defaults to the `check_schema` option.

        """
        if isinstance(required, str) or isinstance(optional, str):
            raise SchemaError(
                "required and optional must be sequences of names, not str"
            )
        self.required: Tuple[str, ...] = tuple(required)
        self.optional: Tuple[str, ...] = tuple(optional)
        self.rest_allowed = bool(rest_allowed)
        self._names = self.required + self.optional
        if check is None:
            check = get_option("check_schema")
        if check:
            self.check()

    @classmethod
    def from_table(cls, table, required, optional, **kwargs):
        """Build a schema from a flat table of names and two counts.

        The first `required` names of the table are required. If `optional`
        is non-negative, the next `optional` names are optional and unknown
        keys are not allowed. A negative `optional` means unknown keys are
        allowed and that there are `-1 - optional` optional names.
        """
        if required < 0:
            raise SchemaError(f"Negative number of required keys: {required}")
        rest = optional < 0
        if rest:
            optional = -1 - optional
        if len(table) < required + optional:
            raise SchemaError(
                f"Table has {len(table)} names,"
                f" expected at least {required + optional}"
            )
        return cls(
            table[:required],
            table[required : required + optional],
            rest,
            **kwargs,
        )

    def check(self):
        """Verify that key names are unique strings.

        Raises:
            SchemaError: A name is not a str or appears more than once.

        """
        seen = set()
        for name in self._names:
            if not isinstance(name, str):
                raise SchemaError(f"Keyword name must be a str: {name!r}")
            if name in seen:
                raise SchemaError(f"Duplicate keyword name: {name!r}")
            seen.add(name)

    @property
    def names(self):
        """Return all names, required first then optional."""
        return self._names

    def __len__(self):
        return len(self._names)

    def __iter__(self):
        return iter(self._names)

    def __contains__(self, name):
        return name in self._names

    def _key(self):
        return (self.required, self.optional, self.rest_allowed)

    def __eq__(self, other):
        return type(other) is type(self) and self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __setattr__(self, attr, value):
        if hasattr(self, "_names"):
            raise AttributeError(f"{type(self).__name__} is immutable")
        super().__setattr__(attr, value)

    def __repr__(self):
        rest = ", **" if self.rest_allowed else ""
        opt = "".join(f", {k}=?" for k in self.optional)
        req = ", ".join(self.required)
        sig = f"{req}{opt}{rest}".lstrip(", ")
        return f"KeywordSchema({sig})"


__all__ = ["KeywordSchema"]
