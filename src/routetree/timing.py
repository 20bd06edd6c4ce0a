"""Per-stage request timing for handlers.

Wrap handlers with ``time_handler`` before mounting them. Each wrapped
handler closes the previous stage on the request's ``timers`` list and
opens its own::

    app.use(time_handler(log_request))
    app.get("/users", time_handler(list_users))

After the request, ``request.timers`` reads ``<enter>``, ``log_request``,
``list_users``; every stage but the last has an ``end``.
"""

import functools
import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger("routetree.timing")

ENTER = "<enter>"


@dataclass(slots=True)
class StageTiming:
    """One pipeline stage. ``start``/``end`` are ``time.perf_counter()`` values."""

    name: str
    start: float
    end: float | None = None

    @property
    def elapsed(self) -> float | None:
        if self.end is None:
            return None
        return self.end - self.start


def _timers(request: Any) -> list[StageTiming]:
    timers = getattr(request, "timers", None)
    if timers is None:
        timers = [StageTiming(name=ENTER, start=time.perf_counter())]
        request.timers = timers
    return timers


def add_stage(request: Any, name: str) -> StageTiming:
    """Close the current stage on *request* and open one named *name*."""
    timers = _timers(request)
    now = time.perf_counter()
    timers[-1].end = now
    stage = StageTiming(name=name, start=now)
    timers.append(stage)
    return stage


def time_handler[F: Callable[..., Any]](fn: F) -> F:
    """Wrap *fn* so each call records a timing stage on its request.

    The request is the first positional argument and must accept a
    ``timers`` attribute. The wrapper keeps *fn*'s ``__name__``, so
    route trees list it under the original name.
    """
    name = getattr(fn, "__name__", None) or "<anonymous>"

    @functools.wraps(fn)
    def timer(request: Any, *args: Any, **kwargs: Any) -> Any:
        add_stage(request, name)
        logger.debug("Timing stage %s", name)
        return fn(request, *args, **kwargs)

    return timer  # type: ignore[return-value]
