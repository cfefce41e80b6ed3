"""Exceptions that may be raised while extracting keyword arguments."""

from .misc import list_str


class KeywordArgumentError(TypeError):
    """Keyword arguments given to a function do not match its schema.

    This derives from TypeError because that is what Python itself raises
    when a call has missing or unexpected keyword arguments.

    Attributes:
        kind: Either "missing" or "unknown".
        keys: The keys that are involved in the error, in the order in
            which they appear in the message.
        message: The error message.

    """

    kind = None

    def __init__(self, keys, message=None):
        """Initialize a KeywordArgumentError."""
        self.keys = list(keys)
        if message is None:
            message = format_keyword_message(self.kind, self.keys)
        super().__init__(message)
        self.message = message


class MissingKeywordError(KeywordArgumentError):
    """A required keyword argument was not given."""

    kind = "missing"


class UnknownKeywordError(KeywordArgumentError):
    """Keyword arguments that the schema does not declare were given."""

    kind = "unknown"


class SchemaError(Exception):
    """Invalid keyword schema.

    This denotes a programming error in the code that declares the schema,
    not a bad call.
    """


_error_classes = {
    "missing": MissingKeywordError,
    "unknown": UnknownKeywordError,
}


def format_keyword_message(kind, keys):
    """Format the message for a keyword error.

    >>> format_keyword_message("missing", ["a"])
    'missing keyword: a'
    >>> format_keyword_message("unknown", ["a", "b"])
    'unknown keywords: a, b'
    >>> format_keyword_message("unknown", [])
    'unknown keyword'
    """
    plural = "s" if len(keys) > 1 else ""
    message = f"{kind} keyword{plural}"
    for k in keys:
        if not isinstance(k, str):
            # Keyword mappings only ever have str keys.
            raise TypeError(
                f"wrong keyword mapping given: key {k!r} is not a str"
            )
    if keys:
        message += ": " + list_str(keys)
    return message


def keyword_error(kind, keys):
    """Return (not raise) the KeywordArgumentError for kind and keys."""
    try:
        cls = _error_classes[kind]
    except KeyError:
        raise ValueError(f"Unknown keyword error kind: {kind!r}") from None
    return cls(keys)


def message_and_class(exc, highlight=False):
    """Render an exception the way a top-level error printer shows it.

    The class name is put between parentheses after the first line of
    the message. If highlight is True, ANSI escapes make the message bold
    and the class name bold and underlined.
    """
    message = str(exc)
    cls = type(exc).__name__
    first, nl, rest = message.partition("\n")
    if highlight:
        head = f"\x1b[1m{first} (\x1b[1;4m{cls}\x1b[m\x1b[1m)\x1b[0m"
    else:
        head = f"{first} ({cls})"
    return head + nl + rest


__consolidate__ = True
__all__ = [
    "KeywordArgumentError",
    "MissingKeywordError",
    "SchemaError",
    "UnknownKeywordError",
    "format_keyword_message",
    "keyword_error",
    "message_and_class",
]
