"""Cancellable timer used to debounce search input.

Each ``schedule`` call replaces the pending one, so a burst of updates
inside the delay window runs the callback once with the last arguments.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import Any, Optional

logger = logging.getLogger(__name__)

DEFAULT_DELAY = 0.3  # seconds


class Debouncer:
    """Runs a callback after *delay* seconds of quiet on the running loop."""

    def __init__(self, delay: float = DEFAULT_DELAY) -> None:
        self._delay = delay
        self._handle: Optional[asyncio.TimerHandle] = None

    @property
    def delay(self) -> float:
        return self._delay

    @property
    def pending(self) -> bool:
        """Whether a call is waiting to fire."""
        return self._handle is not None

    def schedule(self, callback: Callable[..., Any], *args: Any) -> None:
        """Cancel any pending call and schedule *callback(*args)*.

        Must be called from inside a running event loop.
        """
        self.cancel()
        loop = asyncio.get_running_loop()
        self._handle = loop.call_later(self._delay, self._fire, callback, args)

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _fire(self, callback: Callable[..., Any], args: tuple[Any, ...]) -> None:
        self._handle = None
        try:
            callback(*args)
        except Exception:
            logger.exception("Debounced callback %r failed", callback)
