"""
Announcer - Speak an element's description, one utterance at a time.

The announcer is the only component that touches the speech port. Every
request cancels whatever is queued or playing before speaking, so at
most one utterance is ever active. Speech failures are logged and
swallowed: navigation keeps working in silence.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Optional

from voice_navigator.scanner import ElementDescription, FocusableElement
from voice_navigator.speech.base import SpeechPort, Utterance, Voice

if TYPE_CHECKING:
    from voice_navigator.config import NavigatorConfig

logger = logging.getLogger(__name__)


def build_announcement(description: ElementDescription, separator: str = ", ") -> str:
    """Join the non-empty state, label and role, in that order.
    
    Example:
        build_announcement(ElementDescription("checked", "Gift A", "radio button"))
        # "checked, Gift A, radio button"
    """
    parts = (description.state, description.label, description.role)
    return separator.join(part for part in parts if part)


class Announcer:
    """Serializes element descriptions into speech.
    
    Args:
        speech: Host speech port; None means speech is unavailable
        config: Locale, rate, labels and separator
        voice_provider: Returns the currently resolved voice (or None)
    """
    
    def __init__(
        self,
        speech: Optional[SpeechPort],
        config: "NavigatorConfig",
        voice_provider: Optional[Callable[[], Optional[Voice]]] = None,
    ) -> None:
        self._speech = speech
        self.config = config
        self._voice_provider = voice_provider
        self.last_text: str = ""
    
    def describe(self, element: FocusableElement) -> str:
        return build_announcement(element.describe(self.config), self.config.separator)
    
    def announce(self, element: FocusableElement) -> None:
        """Speak the element's state, label and role."""
        self.speak(self.describe(element))
    
    def speak(self, text: str) -> None:
        """Cancel current speech and speak text."""
        if not text:
            return
        if self._speech is None:
            logger.debug("Speech unavailable; announcement dropped")
            return
        
        self.cancel()
        utterance = Utterance(
            text=text,
            lang=self.config.locale,
            rate=self.config.speech_rate,
            voice=self._voice_provider() if self._voice_provider else None,
        )
        self.last_text = text
        try:
            self._speech.speak(utterance)
        except Exception as e:
            logger.error(f"Speech playback failed: {e}")
    
    def cancel(self) -> None:
        """Drop any queued or playing utterance."""
        if self._speech is None:
            return
        try:
            self._speech.cancel()
        except Exception as e:
            logger.error(f"Speech cancel failed: {e}")
