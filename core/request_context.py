"""
Request-scoped activation around translation engine calls.

An engine hands out a RequestContext wrapping whatever per-request state it
needs (a configured client, an open connection...). activated() opens the
context only if it is not already active, and tears it down afterwards only
if it was opened there, whatever the outcome of the call. A failing teardown
is logged and does not replace the result of the call.
"""

from contextlib import contextmanager
from typing import Callable, Iterator, Optional

from locforge_logger import get_logger

logger = get_logger("core.request_context")


class RequestContext:
    """Activatable scope with optional engine hooks."""

    def __init__(self, name: str = "request",
                 on_activate: Optional[Callable[[], None]] = None,
                 on_terminate: Optional[Callable[[], None]] = None):
        self.name = name
        self._on_activate = on_activate
        self._on_terminate = on_terminate
        self._active = False

    @property
    def is_active(self) -> bool:
        return self._active

    def activate(self) -> None:
        if self._on_activate:
            self._on_activate()
        self._active = True
        logger.debug(f"Activated {self.name} context")

    def terminate(self) -> None:
        try:
            if self._on_terminate:
                self._on_terminate()
        finally:
            self._active = False
            logger.debug(f"Terminated {self.name} context")


@contextmanager
def activated(context: RequestContext) -> Iterator[RequestContext]:
    """Activate context if needed; terminate it on exit only if activated here."""
    activated_here = False
    if not context.is_active:
        context.activate()
        activated_here = True
    try:
        yield context
    finally:
        if activated_here:
            try:
                context.terminate()
            except Exception as e:
                logger.warning(f"Failed to terminate {context.name} context: {e}")
