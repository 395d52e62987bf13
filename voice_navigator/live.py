"""
Live Region - Transient status messages.

An assertive live region: posting a message speaks it immediately
(interrupting any element announcement) and a fire-once timer clears it
afterwards. A newer message replaces the old one and its pending timer.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional, Protocol

from voice_navigator.announcer import Announcer

logger = logging.getLogger(__name__)


class TimerHandle(Protocol):
    def cancel(self) -> None:
        ...


class Scheduler(Protocol):
    """Fire-once timers; an asyncio event loop satisfies this."""
    
    def call_later(self, delay: float, callback: Callable[..., Any], *args: Any) -> TimerHandle:
        ...


class LiveRegion:
    """Holds and speaks the current status message.
    
    Example:
        region = LiveRegion(announcer, asyncio.get_running_loop())
        region.post("Please choose a gift first.", clear_after_ms=2000)
    """
    
    def __init__(self, announcer: Announcer, scheduler: Optional[Scheduler] = None) -> None:
        self._announcer = announcer
        self._scheduler = scheduler
        self._message = ""
        self._timer: Optional[TimerHandle] = None
    
    @property
    def message(self) -> str:
        return self._message
    
    def post(self, message: str, clear_after_ms: Optional[float] = None) -> None:
        """Replace the current message and speak it.
        
        Args:
            message: Status text
            clear_after_ms: Clear the message after this delay; None keeps it
        """
        self._cancel_timer()
        self._message = message
        self._announcer.speak(message)
        
        if clear_after_ms is None or not message:
            return
        if self._scheduler is None:
            logger.debug("No scheduler; status message will not auto-clear")
            return
        self._timer = self._scheduler.call_later(clear_after_ms / 1000.0, self.clear)
    
    def clear(self) -> None:
        self._cancel_timer()
        self._message = ""
    
    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
