"""
Gesture Translator - Touch sequences to navigation commands.

    Swipe left  (dx < -threshold, mostly horizontal)  -> NEXT
    Swipe right (dx >  threshold, mostly horizontal)  -> PREVIOUS
    Double tap  (second touch-end within the window)  -> ACTIVATE

A swipe is checked first; only a touch that is not a swipe can count as
a tap. At most one command comes out of each touch-end.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

from voice_navigator.navigator import Command

if TYPE_CHECKING:
    from voice_navigator.config import NavigatorConfig


@dataclass
class GestureState:
    """Transient touch state."""
    touch_start: tuple[float, float] = (0.0, 0.0)
    last_tap_timestamp: Optional[float] = None


@dataclass
class GestureTranslator:
    """Turns touch start/end pairs into Commands.
    
    Args:
        swipe_threshold: Minimum horizontal travel for a swipe (px)
        double_tap_window_ms: Maximum gap between taps of a double tap
    
    Example:
        gestures = GestureTranslator()
        gestures.touch_start(200, 100)
        gestures.touch_end(150, 105, timestamp=1000.0)  # Command.NEXT
    """
    swipe_threshold: float = 30.0
    double_tap_window_ms: float = 300.0
    state: GestureState = field(default_factory=GestureState)
    
    @classmethod
    def from_config(cls, config: "NavigatorConfig") -> "GestureTranslator":
        return cls(
            swipe_threshold=config.swipe_threshold,
            double_tap_window_ms=config.double_tap_window_ms,
        )
    
    def touch_start(self, x: float, y: float) -> None:
        self.state.touch_start = (x, y)
    
    def touch_end(self, x: float, y: float, timestamp: float) -> Optional[Command]:
        """Finish a touch sequence.
        
        Args:
            x: Horizontal end coordinate
            y: Vertical end coordinate
            timestamp: Monotonic time of the touch-end in milliseconds
        
        Returns:
            The emitted command, or None
        """
        start_x, start_y = self.state.touch_start
        dx = x - start_x
        dy = y - start_y
        
        if abs(dx) > abs(dy) and abs(dx) > self.swipe_threshold:
            return Command.NEXT if dx < 0 else Command.PREVIOUS
        
        last = self.state.last_tap_timestamp
        if last is not None:
            gap = timestamp - last
            if 0 < gap < self.double_tap_window_ms:
                self.state.last_tap_timestamp = None
                return Command.ACTIVATE
        
        self.state.last_tap_timestamp = timestamp
        return None
    
    def reset(self) -> None:
        self.state = GestureState()
