"""
Focus Navigator - The single owner of the navigation position.

States:
    Idle        current_index == -1
    Focused(i)  0 <= i < N

Transitions:
    NEXT      i -> (i + 1) mod N, announce       (N == 0: no-op)
    PREVIOUS  i -> (i - 1 + N) mod N, announce   (N == 0: no-op, Idle is i = -1)
    ACTIVATE  Focused(i): click elements[i]      (Idle or N == 0: no-op)

Traversal is circular; there is no edge state. Keyboard and touch input
both end up in dispatch(), so nothing else ever writes the index.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol, Sequence

from voice_navigator.scanner import FocusableElement

logger = logging.getLogger(__name__)


class Command(Enum):
    """Logical navigation commands."""
    NEXT = "next"
    PREVIOUS = "previous"
    ACTIVATE = "activate"


class ElementAnnouncer(Protocol):
    def announce(self, element: FocusableElement) -> None:
        ...


@dataclass
class NavigatorState:
    """Navigation state for one activation session.
    
    Attributes:
        elements: Snapshot taken at scan time
        current_index: Focused position, -1 when nothing is focused yet
        is_active: Whether a session is running
    """
    elements: tuple[FocusableElement, ...] = ()
    current_index: int = -1
    is_active: bool = False
    
    @property
    def is_idle(self) -> bool:
        return self.current_index < 0
    
    @property
    def current(self) -> Optional[FocusableElement]:
        if self.is_idle or self.current_index >= len(self.elements):
            return None
        return self.elements[self.current_index]


class FocusNavigator:
    """Focus state machine over the scanned elements.
    
    Example:
        navigator = FocusNavigator(announcer)
        navigator.load(scanner.scan(container))
        navigator.dispatch(Command.NEXT)      # focuses and announces elements[0]
        navigator.dispatch(Command.ACTIVATE)  # clicks elements[0]
    """
    
    def __init__(self, announcer: Optional[ElementAnnouncer] = None) -> None:
        self._announcer = announcer
        self._state = NavigatorState()
    
    @property
    def state(self) -> NavigatorState:
        return self._state
    
    @property
    def current_index(self) -> int:
        return self._state.current_index
    
    @property
    def elements(self) -> tuple[FocusableElement, ...]:
        return self._state.elements
    
    def load(self, elements: Sequence[FocusableElement]) -> None:
        """Start a fresh session over a new snapshot, in Idle."""
        self._state = NavigatorState(elements=tuple(elements), current_index=-1, is_active=True)
    
    def clear(self) -> None:
        """End the session and drop the snapshot."""
        self._state = NavigatorState()
    
    def dispatch(self, command: Command) -> bool:
        """Apply one command.
        
        Returns:
            True if the command focused or activated an element
        """
        count = len(self._state.elements)
        if count == 0:
            logger.debug(f"Ignoring {command.value}: no focusable elements")
            return False
        
        if command == Command.ACTIVATE:
            return self._activate()
        
        index = self._state.current_index
        if command == Command.NEXT:
            index = (index + 1) % count
        else:
            index = (index - 1 + count) % count
        
        self._state.current_index = index
        if self._announcer is not None:
            self._announcer.announce(self._state.elements[index])
        return True
    
    def _activate(self) -> bool:
        element = self._state.current
        if element is None:
            logger.debug("Ignoring activate: nothing focused")
            return False
        try:
            element.activate()
        except Exception as e:
            logger.warning(f"Activation of {element.role.name.lower()} failed: {e}")
            return False
        return True
