"""Global options, read from the KWEXTRACT_OPTIONS environment variable.

The syntax is the one of an HTTP query string, except values need not be
urlencoded, e.g.

    KWEXTRACT_OPTIONS="check_schema=false&trace=true"

"""

import os
import urllib.parse
from contextlib import contextmanager
from contextvars import ContextVar

ENV_VAR = "KWEXTRACT_OPTIONS"

DEFAULTS = {
    # Validate the key names of schemas when they are built.
    "check_schema": True,
    # Emit tracer events from the extractor.
    "trace": True,
}

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


class OptionError(Exception):
    """Indicates that an option string could not be understood."""


def _to_bool(name, value):
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        v = value.strip().lower()
        if v in _TRUE:
            return True
        if v in _FALSE:
            return False
    raise OptionError(f"Option {name!r} expects a boolean, got {value!r}")


def check_options(**opts):
    """Check option names and values, return the full set of options."""
    res = dict(DEFAULTS)
    for k, v in opts.items():
        if k not in DEFAULTS:
            raise OptionError(f"Unknown option: {k!r}")
        res[k] = _to_bool(k, v)
    return res


def parse_options(spec=None):
    """Parse an option string.

    If spec is None, it is fetched from the KWEXTRACT_OPTIONS environment
    variable. An empty or absent spec gives the defaults.
    """
    if spec is None:
        spec = os.environ.get(ENV_VAR, "")
    spec = spec.strip()
    if not spec:
        return dict(DEFAULTS)
    try:
        opts = urllib.parse.parse_qs(
            spec, keep_blank_values=True, strict_parsing=True, errors="strict"
        )
    except ValueError as exc:
        raise OptionError(f"Malformed option string: {spec!r}") from exc
    for k in opts:
        if len(opts[k]) != 1:
            raise OptionError(f"Option {k!r} is given more than once")
        opts[k] = opts[k][0]
    return check_options(**opts)


_options = ContextVar("kwextract_options", default=None)


def get_options():
    """Return the current options.

    The environment is only read the first time, after which the result
    is kept for the current context.
    """
    opts = _options.get()
    if opts is None:
        opts = parse_options()
        _options.set(opts)
    return opts


def reload_options():
    """Read the environment again and return the new options."""
    opts = parse_options()
    _options.set(opts)
    return opts


def get_option(name):
    """Return the value of a single option."""
    return get_options()[name]


@contextmanager
def set_options(**overrides):
    """Override options for the duration of a `with` block."""
    check_options(**overrides)
    opts = dict(get_options())
    opts.update((k, _to_bool(k, v)) for k, v in overrides.items())
    token = _options.set(opts)
    try:
        yield opts
    finally:
        _options.reset(token)


__all__ = [
    "DEFAULTS",
    "ENV_VAR",
    "OptionError",
    "check_options",
    "get_option",
    "get_options",
    "parse_options",
    "reload_options",
    "set_options",
]
