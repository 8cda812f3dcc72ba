"""Operation timing for ``--verbose`` runs.

A service method decorated with :func:`traced` opens a root span; the
walkthrough opens one child span per step with :func:`trace_span`, and
``BaseService`` records result lengths on whichever span is active. The
finished tree lands in ``ServiceResult.meta["telemetry"]``. While
disabled every entry point is one ContextVar lookup.
"""

from __future__ import annotations

import functools
import time
from collections.abc import Callable, Generator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from typing import Any, ParamSpec, TypeVar

import structlog

from lenstr.services.result import ServiceResult

_enabled: ContextVar[bool] = ContextVar("lenstr_telemetry_enabled", default=False)
_active: ContextVar[Span | None] = ContextVar("lenstr_active_span", default=None)

_P = ParamSpec("_P")
_R = TypeVar("_R")


@dataclass
class Span:
    """One timed operation or walkthrough step."""

    name: str
    parent: Span | None = None
    children: list[Span] = field(default_factory=list)
    start_time: float = field(default_factory=time.perf_counter)
    end_time: float | None = None
    annotations: dict[str, Any] = field(default_factory=dict)

    @property
    def duration_ms(self) -> float:
        if self.end_time is None:
            return 0.0
        return (self.end_time - self.start_time) * 1000

    def end(self) -> None:
        self.end_time = time.perf_counter()

    def annotate(self, key: str, value: Any) -> None:
        self.annotations[key] = value

    def to_dict(self) -> dict[str, Any]:
        tree: dict[str, Any] = {"name": self.name, "duration_ms": round(self.duration_ms, 3)}
        if self.annotations:
            tree["annotations"] = dict(self.annotations)
        if self.children:
            tree["children"] = [child.to_dict() for child in self.children]
        return tree


def _close(span: Span, token: Token[Span | None], *, ok: bool) -> None:
    span.end()
    _active.reset(token)
    structlog.get_logger("lenstr.telemetry").debug(
        "span.complete",
        span_name=span.name,
        duration_ms=round(span.duration_ms, 3),
        ok=ok,
        children=len(span.children),
    )


@contextmanager
def trace_span(name: str) -> Generator[Span | None]:
    """Time a step under the active span; yields None outside a traced call."""
    parent = _active.get() if _enabled.get() else None
    if parent is None:
        yield None
        return

    step = Span(name=name, parent=parent)
    parent.children.append(step)
    token = _active.set(step)
    ok = False
    try:
        yield step
        ok = True
    finally:
        _close(step, token, ok=ok)


def traced(func: Callable[_P, _R]) -> Callable[_P, _R]:  # noqa: UP047
    """Time a service method and attach the span tree to its ServiceResult."""

    @functools.wraps(func)
    def wrapper(*args: _P.args, **kwargs: _P.kwargs) -> _R:
        if not _enabled.get():
            return func(*args, **kwargs)

        root = Span(name=func.__qualname__)
        token = _active.set(root)
        try:
            result = func(*args, **kwargs)
        except Exception:
            _close(root, token, ok=False)
            raise

        if not isinstance(result, ServiceResult):
            _close(root, token, ok=True)
            return result
        _close(root, token, ok=result.ok)
        meta = {**(result.meta or {}), "telemetry": root.to_dict()}
        return result.model_copy(update={"meta": meta})  # type: ignore[return-value]

    return wrapper


def enable_telemetry() -> None:
    _enabled.set(True)


def disable_telemetry() -> None:
    _enabled.set(False)


def get_current_span() -> Span | None:
    """The span results should be annotated on, if telemetry is on."""
    return _active.get() if _enabled.get() else None
