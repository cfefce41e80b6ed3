"""Event tracing for keyword extraction.

The extractor reports what it does by emitting events on the current
tracer, under the path of the block it runs in, e.g.
`/extract_keywords/found`. Listeners subscribe to glob patterns over these
paths. When nobody listens, emitting an event does nothing.
"""

import re
from contextvars import ContextVar
from copy import copy


def glob_to_regex(glob):
    """Compile a glob over event paths.

    * `**` matches any sequence of path segments, `/**/` also matches `/`
    * `*` matches within a single segment
    * A glob without a leading `/` may match at any depth
    """

    def segment(m):
        return r"(/.*/|/)" if m.group() == "/**/" else r"[^/]*"

    if glob.startswith("**"):
        glob = "/" + glob
    elif not glob.startswith("/"):
        glob = "/**/" + glob
    if glob.endswith("**"):
        glob += "/*"
    return re.compile(re.sub(r"/\*\*/|\*", segment, glob))


class Tracer:
    """Dispatch extraction events to the listeners registered on them."""

    def __init__(self):
        """Initialize the Tracer."""
        self.blocks = []
        self.listeners = []

    @property
    def path(self):
        """Return the path of the innermost open block."""
        return "".join(f"/{blk.name}" for blk in self.blocks)

    def emit(self, event, **payload):
        """Call every listener whose pattern matches the event's path."""
        where = f"{self.path}/{event}"
        for pattern, fn in self.listeners:
            if pattern.fullmatch(where):
                fn(**payload, _event=event, _curpath=where)

    def on(self, pattern, fn):
        """Call fn on every event that matches pattern (glob or regex)."""
        if not isinstance(pattern, re.Pattern):
            pattern = glob_to_regex(pattern)
        self.listeners.append((pattern, fn))

    def __copy__(self):
        cp = Tracer()
        cp.blocks = list(self.blocks)
        cp.listeners = list(self.listeners)
        return cp

    def __call__(self, name, **payload):
        """Open a block named name, see TracerContextManager."""
        return TracerContextManager(self, name, payload)


class TracerContextManager:
    """A traced block: emits `enter` when opened and `exit` when closed.

    The exit event carries the results given to `set_results` and the
    exception that ended the block, if any, as `_error`.
    """

    def __init__(self, tracer, name, payload):
        """Initialize a TracerContextManager."""
        self.tr = tracer
        self.name = name
        self.payload = payload
        self.results = {}

    def set_results(self, **results):
        """Set the payload of the exit event."""
        self.results = results

    def __enter__(self):
        self.tr.blocks.append(self)
        self.tr.emit("enter", **self.payload)
        return self

    def __exit__(self, exc_type, exc_value, tb):
        try:
            self.tr.emit("exit", _error=exc_value, **self.results)
        finally:
            self.tr.blocks.pop()

    def __repr__(self):
        return f"<TracerContextManager {self.name}>"


_tracer = ContextVar("tracer", default=Tracer())


def tracer(name=None, **payload):
    """Return the current tracer, or open a block on it if name is given."""
    tr = _tracer.get()
    if name is None:
        assert not payload
        return tr
    return tr(name, **payload)


class TraceListener:
    """Listeners installed on the tracer for the duration of a `with` block.

    Methods named `on_<event>` listen to that event, under `focus` if it
    is given. Installing works on a copy of the current tracer, so the
    listeners are gone once the block exits.
    """

    def __init__(self, focus=None):
        """Initialize a TraceListener."""
        self.focus = focus

    def install(self, tracer):
        """Register the `on_<event>` methods on tracer."""
        for attr in dir(self):
            if attr.startswith("on_"):
                event = attr[3:]
                patt = f"{self.focus}/{event}" if self.focus else event
                tracer.on(patt, getattr(self, attr))

    def post(self):
        """Run once the block has exited."""

    def __enter__(self):
        self.tracer = copy(_tracer.get())
        self.token = _tracer.set(self.tracer)
        self.install(self.tracer)
        return self

    def __exit__(self, exc_type, exc_value, exc_traceback):
        _tracer.reset(self.token)
        self.post()


class ExtractionLog(TraceListener):
    """Record the events of keyword extraction calls.

    `events` lists `(event, payload)` in order, payload holding the public
    arguments of the event. `calls` holds the same entries grouped by
    extraction call.
    """

    def __init__(self, focus="extract_keywords"):
        """Initialize an ExtractionLog."""
        super().__init__(focus)
        self.events = []
        self.calls = []

    def install(self, tracer):
        """Listen to every event of the focused block."""
        tracer.on(f"{self.focus}/*", self._record)

    def _record(self, _event=None, **kwargs):
        payload = {k: v for k, v in kwargs.items() if not k.startswith("_")}
        if _event == "enter" or not self.calls:
            self.calls.append([])
        self.events.append((_event, payload))
        self.calls[-1].append((_event, payload))

    def keys(self, event):
        """Return the keys reported by all events of the given kind."""
        res = []
        for ev, payload in self.events:
            if ev == event:
                if "key" in payload:
                    res.append(payload["key"])
                else:
                    res.extend(payload.get("keys", ()))
        return res


__consolidate__ = True
__all__ = [
    "ExtractionLog",
    "TraceListener",
    "Tracer",
    "TracerContextManager",
    "glob_to_regex",
    "tracer",
]
