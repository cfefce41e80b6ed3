"""Extraction of keyword arguments according to a schema."""

from .hostmap import kw_delete, kw_has, kw_keys, kw_lookup, kw_size
from .options import get_option
from .schema import KeywordSchema
from .utils import UNSPECIFIED, keyword_error, tracer


class _Silent:
    """Stand-in for the tracer when tracing is disabled."""

    def emit(self, name, **kwargs):
        pass

    def set_results(self, **results):
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, tb):
        pass


_silent = _Silent()


def extract_keywords(
    mapping, schema, values=None, *, write_values=None, consume_keys=None
):
    """Extract the keyword arguments declared by schema from mapping.

    Required keys are looked up first, in order, and the first one that is
    missing raises a MissingKeywordError. Optional keys are looked up next;
    the buffer slot of an absent one is set to UNSPECIFIED. Finally, if
    the schema does not allow other keys, an UnknownKeywordError is raised
    if the mapping holds any key the schema does not declare.

    Deletions made before an error is raised are not undone.

    Arguments:
        mapping: A dict of keyword arguments, or None (no keywords).
        schema: A KeywordSchema.
        values: A mutable sequence of length `len(schema)` to receive the
            values, or None to only validate.
        write_values: Whether to store the values in `values`. Defaults to
            whether `values` is given.
        consume_keys: Whether to delete matched keys from the mapping.
            Defaults to whether `values` is given.

    Returns:
        The number of keys that were found.

    """
    nreq = len(schema.required)
    ntotal = len(schema)
    if write_values is None:
        write_values = values is not None
    if consume_keys is None:
        consume_keys = values is not None
    if write_values and values is None:
        raise ValueError("write_values requires a values buffer")
    if values is not None and len(values) != ntotal:
        raise ValueError(
            f"values buffer has length {len(values)}, expected {ntotal}"
        )

    assigned = [False] * ntotal
    filled = 0

    def take(i, key):
        # Presence is checked apart from the value, which may be anything.
        found = kw_has(mapping, key)
        if not found:
            val = UNSPECIFIED
        elif consume_keys:
            val = kw_delete(mapping, key)
        else:
            val = kw_lookup(mapping, key)
        if write_values:
            values[i] = val
            assigned[i] = True
        return found, val

    if get_option("trace"):
        tr = tracer()
        block = tr("extract_keywords", schema=schema)
    else:
        tr = block = _silent

    with block:
        for i, key in enumerate(schema.required):
            found, val = take(i, key)
            if not found:
                tr.emit("missing", key=key)
                raise keyword_error("missing", [key])
            tr.emit("found", key=key, value=val)
            filled += 1

        if mapping is not None:
            for i, key in enumerate(schema.optional, nreq):
                found, val = take(i, key)
                if found:
                    tr.emit("found", key=key, value=val)
                    filled += 1

        if not schema.rest_allowed and mapping is not None:
            permitted = 0 if consume_keys else filled
            if kw_size(mapping) > permitted:
                unknown = _unknown_keys(mapping, schema, consume_keys)
                tr.emit("unknown", keys=unknown)
                raise keyword_error("unknown", unknown)

        if values is not None:
            for i in range(ntotal):
                if not assigned[i]:
                    values[i] = UNSPECIFIED

        block.set_results(filled=filled)

    return filled


def _unknown_keys(mapping, schema, consume_keys):
    if consume_keys:
        for key in schema:
            kw_delete(mapping, key)
        return kw_keys(mapping)
    else:
        return [k for k in kw_keys(mapping) if k not in schema]


def get_kwargs(mapping, table, required, optional, values=None):
    """Extract keyword arguments using a flat table of names.

    This is `extract_keywords` with the schema given the way native
    extensions declare it: a table of names, the number of required names
    and the number of optional names, which is negative (`-1 - count`) if
    unknown keys are allowed.
    """
    schema = KeywordSchema.from_table(table, required, optional)
    return extract_keywords(mapping, schema, values)


class KeywordExtractor:
    """Extract keyword arguments according to a fixed schema.

    >>> ext = KeywordExtractor(KeywordSchema(["name"], ["age"]))
    >>> ext.fetch({"name": "x"})
    (['x', UNSPECIFIED], 1)
    """

    def __init__(self, schema):
        """Initialize a KeywordExtractor."""
        if not isinstance(schema, KeywordSchema):
            schema = KeywordSchema(*schema)
        self.schema = schema

    def extract(self, mapping, values=None, **flags):
        """Extract into values, see `extract_keywords`."""
        return extract_keywords(mapping, self.schema, values, **flags)

    def probe(self, mapping):
        """Validate mapping against the schema without modifying it."""
        return extract_keywords(mapping, self.schema, None)

    def fetch(self, mapping):
        """Consume the keys of mapping and return (values, filled)."""
        values = [UNSPECIFIED] * len(self.schema)
        filled = extract_keywords(mapping, self.schema, values)
        return values, filled

    __call__ = fetch

    def __repr__(self):
        return f"KeywordExtractor({self.schema!r})"


__all__ = [
    "KeywordExtractor",
    "extract_keywords",
    "get_kwargs",
]
