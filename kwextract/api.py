"""Decorator to declare the keyword arguments of a function."""

from functools import update_wrapper

from .extract import KeywordExtractor
from .schema import KeywordSchema


class KeywordFunction:
    """Decorates a function to receive its keyword arguments by position.

    The keyword arguments of a call are extracted according to the schema
    and appended to the positional arguments, required names first, then
    optional names. An optional name that is not given is passed as
    UNSPECIFIED. If the schema allows other keys, they are passed on as
    keyword arguments.
    """

    def __init__(self, fn, schema, args=()):
        self.fn = fn
        self.schema = schema
        self.args = args
        self.extractor = KeywordExtractor(schema)
        update_wrapper(self, fn)

    def __call__(self, *args, **kwargs):
        """Extract the keyword arguments and call the function."""
        values, _ = self.extractor.fetch(kwargs)
        if self.schema.rest_allowed:
            return self.fn(*self.args, *args, *values, **kwargs)
        else:
            return self.fn(*self.args, *args, *values)

    def __get__(self, obj, objtype):
        if obj is None:
            return self
        return KeywordFunction(self.fn, self.schema, args=(*self.args, obj))


def takes_keywords(required=(), optional=(), rest=False):
    """Declare the keyword arguments a function takes.

    >>> @takes_keywords(["name"], ["age"])
    ... def person(name, age):
    ...     return name, age
    >>> person(name="x")
    ('x', UNSPECIFIED)
    """
    schema = KeywordSchema(required, optional, rest)

    def deco(fn):
        return KeywordFunction(fn, schema)

    return deco


__all__ = ["KeywordFunction", "takes_keywords"]
