"""
Speech Base - SpeechPort protocol and common types.

The simulator never talks to a concrete synthesizer. Everything it needs
from the host (voice enumeration, a voice-list-changed notification,
playback and cancellation) goes through this port, so tests can swap in
a recording fake.

HOST CONTRACT:
    Hosts MUST:
        - Return the voices they can currently speak with from get_voices()
        - Replace any queued or playing utterance only when cancel() is called
        - Call the registered callback whenever their voice list changes
        - Raise SpeechEngineError (or any exception) on failure
    
    Hosts MUST NOT:
        - Retry failed playback on their own
        - Pick a voice when the utterance carries one
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Optional, Protocol, runtime_checkable


VoicesChangedCallback = Callable[[], None]


@dataclass(frozen=True)
class Voice:
    """A synthesis voice reported by the host.
    
    Attributes:
        name: Display name (e.g. "유나", "Google 한국의")
        lang: Locale tag (e.g. "ko-KR")
        default: Whether the host marks this voice as its default
        local_service: True for on-device voices, False for cloud-backed
        voice_uri: Host-specific identifier
    """
    name: str
    lang: str
    default: bool = False
    local_service: bool = True
    voice_uri: str = ""


@dataclass
class Utterance:
    """A single request to speak text."""
    text: str
    lang: str
    rate: float = 1.0
    voice: Optional[Voice] = None


@runtime_checkable
class SpeechPort(Protocol):
    """Protocol for the host speech synthesis capability."""
    
    def get_voices(self) -> list[Voice]:
        """Return the currently available voices."""
        ...
    
    def speak(self, utterance: Utterance) -> None:
        """Queue an utterance for playback."""
        ...
    
    def cancel(self) -> None:
        """Drop every queued or playing utterance."""
        ...
    
    def on_voices_changed(self, callback: Optional[VoicesChangedCallback]) -> None:
        """Register (or clear, with None) the voice-list-changed callback."""
        ...


class BaseSpeech(ABC):
    """Base class for speech hosts with the notification plumbing."""
    
    def __init__(self) -> None:
        self._voices_changed: Optional[VoicesChangedCallback] = None
    
    @abstractmethod
    def get_voices(self) -> list[Voice]:
        ...
    
    @abstractmethod
    def speak(self, utterance: Utterance) -> None:
        ...
    
    @abstractmethod
    def cancel(self) -> None:
        ...
    
    def on_voices_changed(self, callback: Optional[VoicesChangedCallback]) -> None:
        self._voices_changed = callback
    
    def notify_voices_changed(self) -> None:
        """Tell the registered listener that get_voices() changed."""
        if self._voices_changed is not None:
            self._voices_changed()
