"""
Voice Resolution - Pick one synthesis voice for the target locale.

Fallback chain:
    1. iOS-like hosts: a voice named with a preferred proper name
    2. The host's default voice for the locale
    3. An on-device voice for the locale
    4. Any voice for the locale
    5. None (the synthesizer's own default is used)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable, Optional, Sequence

from voice_navigator.platform import Platform
from voice_navigator.speech.base import SpeechPort, Voice

if TYPE_CHECKING:
    from voice_navigator.config import NavigatorConfig

logger = logging.getLogger(__name__)


def select_voice(
    voices: Iterable[Voice],
    platform: Platform,
    locale: str,
    preferred_names: Sequence[str] = (),
) -> Optional[Voice]:
    """Apply the fallback chain to a voice list.
    
    Args:
        voices: Voices reported by the host
        platform: Host classification
        locale: Target locale tag, compared exactly
        preferred_names: Proper names tried in order on iOS-like hosts
    
    Returns:
        The selected voice, or None if no voice speaks the locale
    """
    candidates = [v for v in voices if v.lang == locale]
    
    if platform == Platform.IOS_LIKE:
        for name in preferred_names:
            for voice in candidates:
                if voice.name == name:
                    return voice
    
    for voice in candidates:
        if voice.default:
            return voice
    
    for voice in candidates:
        if voice.local_service:
            return voice
    
    return candidates[0] if candidates else None


class VoiceResolver:
    """Keeps the resolved voice current for the engine's lifetime.
    
    Resolves once on construction and again every time the host reports
    a voice-list change. Enumeration failures are logged and count as
    "no voices" for that attempt; the previously resolved voice is kept.
    
    Example:
        resolver = VoiceResolver(speech, Platform.IOS_LIKE, config)
        utterance.voice = resolver.voice
    """
    
    def __init__(
        self,
        speech: Optional[SpeechPort],
        platform: Platform,
        config: "NavigatorConfig",
    ) -> None:
        self._speech = speech
        self.platform = platform
        self._locale = config.locale
        self._preferred = config.preferred_voice_names
        self._voice: Optional[Voice] = None
        self._attached = False
        
        if self._speech is not None:
            self._speech.on_voices_changed(self.refresh)
            self._attached = True
        self.refresh()
    
    @property
    def voice(self) -> Optional[Voice]:
        """The cached voice, or None to use the synthesizer default."""
        return self._voice
    
    def refresh(self) -> Optional[Voice]:
        """Re-run the fallback chain against the host's current voices."""
        voices = self._enumerate()
        if not voices:
            # Voice lists often arrive asynchronously; wait for the notification.
            return self._voice
        
        found = select_voice(voices, self.platform, self._locale, self._preferred)
        if found is None:
            logger.warning(f"No synthesis voice available for {self._locale}")
            return self._voice
        
        if found != self._voice:
            logger.debug(f"Resolved voice {found.name!r} ({found.lang})")
        self._voice = found
        return found
    
    def _enumerate(self) -> list[Voice]:
        if self._speech is None:
            return []
        try:
            return list(self._speech.get_voices())
        except Exception as e:
            logger.warning(f"Failed to list synthesis voices: {e}")
            return []
    
    def close(self) -> None:
        """Stop listening for voice-list changes."""
        if not self._attached:
            return
        self._attached = False
        try:
            self._speech.on_voices_changed(None)
        except Exception as e:
            logger.warning(f"Failed to detach voice listener: {e}")
