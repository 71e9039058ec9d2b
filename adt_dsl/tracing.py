from __future__ import annotations

import logging
import os
from collections import deque
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Optional
from .errors import ADTError
from .ops import show

logger: logging.Logger = logging.getLogger(__name__)

ENV_FLAG = "ADT_DSL_TRACE"
DEFAULT_MAX_ROOTS = 100
TRUNCATE_WIDTH = 35

@dataclass
class Trace:
    """One constructor call (`op` is the variant) or matcher application (`op` is "case")."""
    type: str
    op: str
    args: list[str]
    events: list[str]
    result: Optional[str]
    matched: Optional[str] = None

    @property
    def call(self) -> str:
        return f"{self.type}.{self.op}"

def truncate(rendered: str, width: int = TRUNCATE_WIDTH) -> str:
    """First line of a rendered value, cut to `width` characters."""
    line, *rest = rendered.split("\n", 1)
    if rest or len(line) > width:
        return line[:width] + "..."
    return line

@dataclass
class TraceTree:
    trace: Trace
    children: list[TraceTree]
    size: int

    @property
    def pending(self) -> bool:
        return self.trace.result is None

    def __str__(self):
        t = self.trace
        string = " ".join([t.call, *map(truncate, t.args)])
        string += f" => {'<pending>' if self.pending else truncate(t.result)}"
        if self.children:
            string += f" ({len(self.children)} nested, {self.size} nodes)"
        return string

    __repr__ = __str__

    def stack_trace(self, only_pending: bool = True) -> list[TraceTree]:
        """The path from this tree down through the last nested call of each level."""
        path: list[TraceTree] = []
        tree = self
        while not (only_pending and not tree.pending):
            path.append(tree)
            if not tree.children:
                break
            tree = tree.children[-1]
        return path

class Recorder:
    """Collects trace trees of constructor calls and matcher applications."""
    roots: deque[TraceTree]
    stack: list[TraceTree]

    def __init__(self, max_roots: int = DEFAULT_MAX_ROOTS):
        self.roots = deque(maxlen=max_roots)
        self.stack = []

    def invoke(self, type_: str, op: str, args: list[str]) -> TraceTree:
        tree = TraceTree(Trace(type_, op, args, [], None), [], 1)
        if self.stack:
            self.stack[-1].children.append(tree)
            for ancestor in self.stack:
                ancestor.size += 1
        else:
            self.roots.append(tree)
        self.stack.append(tree)
        return tree

    def event(self, message: str):
        if self.stack:
            self.stack[-1].trace.events.append(message)

    def result(self, result: str):
        self.stack[-1].trace.result = result
        self.stack.pop()

    def abandon(self) -> TraceTree:
        """Pop a failed invocation, leaving its result pending."""
        return self.stack.pop()

    def clear(self):
        self.roots.clear()
        self.stack.clear()

_forced_state: bool | None = None
_active: Recorder | None = None
_default = Recorder()

def _coerce_flag(value: str | None) -> bool:
    if value is None:
        return False
    lowered = value.strip().lower()
    return lowered not in {"", "0", "false", "off", "no"}

def tracing_active() -> bool:
    if _active is not None:
        return True
    if _forced_state is not None:
        return _forced_state
    return _coerce_flag(os.getenv(ENV_FLAG))

def enable_tracing():
    global _forced_state
    _forced_state = True

def disable_tracing():
    global _forced_state
    _forced_state = False

def current_recorder() -> Recorder | None:
    if _active is not None:
        return _active
    return _default if tracing_active() else None

def default_recorder() -> Recorder:
    return _default

@contextmanager
def traced(max_roots: int = DEFAULT_MAX_ROOTS) -> Iterator[Recorder]:
    """Record every traced operation inside the block into a fresh recorder."""
    global _active
    previous = _active
    _active = Recorder(max_roots)
    try:
        yield _active
    finally:
        _active = previous

def event(message: str):
    if (recorder := current_recorder()) is not None:
        recorder.event(message)

@contextmanager
def span(type_: str, op: str, args: Sequence[Any]) -> Iterator[Trace | None]:
    """
    Trace one invocation. The caller fills in `trace.result` on success;
    an escaping ADTError gets the root of the failing operation attached.
    """
    recorder = current_recorder()
    if recorder is None:
        yield None
        return

    tree = recorder.invoke(type_, op, [str(show(arg)) for arg in args])
    try:
        yield tree.trace
    except ADTError as error:
        recorder.abandon()
        if not recorder.stack and not error.traces:
            error.traces = [tree]
            logger.debug("attached trace %s to %s", tree, type(error).__name__)
        raise
    except BaseException:
        recorder.abandon()
        raise
    else:
        recorder.result(tree.trace.result or "")
