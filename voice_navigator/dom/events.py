"""
Host events and listener registry.

Mirrors the small slice of the DOM event model the simulator consumes:
key-down events from the document and touch start/end events from the
container.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Any, Callable


Listener = Callable[[Any], None]


def _now_ms() -> float:
    return time.monotonic() * 1000.0


@dataclass
class KeyEvent:
    """A key-down event.
    
    Attributes:
        key: Key identifier ("ArrowRight", "ArrowLeft", "Enter", ...)
    """
    key: str
    default_prevented: bool = False
    
    def prevent_default(self) -> None:
        self.default_prevented = True


@dataclass
class TouchEvent:
    """A touch-start or touch-end event for the first touch point.
    
    Attributes:
        x: Horizontal client coordinate
        y: Vertical client coordinate
        timestamp: Monotonic time in milliseconds
    """
    x: float
    y: float
    timestamp: float = field(default_factory=_now_ms)
    default_prevented: bool = False
    
    def prevent_default(self) -> None:
        self.default_prevented = True


class EventTarget:
    """Listener registry with DOM-like add/remove/dispatch semantics.
    
    Adding the same listener twice for one event type is a no-op, and
    removing a listener that was never added is silently ignored.
    """
    
    def __init__(self) -> None:
        self._listeners: dict[str, list[Listener]] = {}
    
    def add_event_listener(self, event_type: str, listener: Listener) -> None:
        listeners = self._listeners.setdefault(event_type, [])
        if listener not in listeners:
            listeners.append(listener)
    
    def remove_event_listener(self, event_type: str, listener: Listener) -> None:
        listeners = self._listeners.get(event_type)
        if listeners and listener in listeners:
            listeners.remove(listener)
    
    def listener_count(self, event_type: str) -> int:
        return len(self._listeners.get(event_type, ()))
    
    def dispatch_event(self, event_type: str, event: Any) -> bool:
        """Deliver an event to every listener in registration order.
        
        Returns:
            False if any listener called prevent_default()
        """
        for listener in list(self._listeners.get(event_type, ())):
            listener(event)
        return not getattr(event, "default_prevented", False)


@dataclass
class DomEvent:
    """A click or submit event raised by an element's native behavior."""
    type: str
    target: Any = None
    default_prevented: bool = False
    
    def prevent_default(self) -> None:
        self.default_prevented = True
