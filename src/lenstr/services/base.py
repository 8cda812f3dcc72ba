"""BaseService — shared plumbing for the string services.

Every service receives :class:`LenstrSettings` at construction time. The
settings decide how CLI text maps to bytes and which allocation limit
applies while an operation runs.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from lenstr.domain.buffer import allocation_limit
from lenstr.domain.errors import AllocationError
from lenstr.domain.value import ImmutableString, from_text
from lenstr.services.result import ServiceResult
from lenstr.services.telemetry import get_current_span

if TYPE_CHECKING:
    from lenstr.config.settings import LenstrSettings

logger = logging.getLogger(__name__)


class BaseService:
    """Base for service classes.

    Subclasses build a payload inside :meth:`_run`, which converts library
    failures into error results::

        class StringService(BaseService):
            def trim(self, text: str) -> ServiceResult:
                return self._run("trim", lambda: self._describe(trim(self._encode(text))))
    """

    def __init__(self, settings: LenstrSettings) -> None:
        self._settings = settings

    def _encode(self, text: str) -> ImmutableString:
        return from_text(text, self._settings.output.encoding)

    def _describe(self, value: ImmutableString) -> dict[str, Any]:
        """Payload for a string result: decoded content plus raw length."""
        output = self._settings.output
        return {
            "content": value.decode(output.encoding, output.errors),
            "length": value.length,
        }

    def _run(self, op: str, build: Callable[[], dict[str, Any]]) -> ServiceResult:
        """Run *build* under the configured allocation limit.

        INVARIANT: AllocationError and undecodable input become error
        results; any other exception is a bug and propagates.
        """
        limit = self._settings.memory.max_length
        try:
            with allocation_limit(limit):
                data = build()
        except AllocationError as exc:
            logger.warning("Allocation failed in %s: %s", op, exc)
            return ServiceResult.failure(
                op,
                "ALLOCATION_FAILED",
                str(exc),
                requested=exc.requested,
                limit=exc.limit,
            )
        except UnicodeError as exc:
            logger.debug("Input rejected in %s", op, exc_info=True)
            return ServiceResult.failure(op, "INVALID_INPUT", str(exc))

        span = get_current_span()
        if span is not None and "length" in data:
            span.annotate("length", data["length"])
        return ServiceResult.success(op, data)
