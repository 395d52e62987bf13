"""
Speech - Host speech port and voice resolution.

    base    - SpeechPort protocol, Voice, Utterance, BaseSpeech
    voices  - select_voice fallback chain and VoiceResolver
"""

from voice_navigator.speech.base import (
    BaseSpeech,
    SpeechPort,
    Utterance,
    Voice,
    VoicesChangedCallback,
)
from voice_navigator.speech.voices import VoiceResolver, select_voice

__all__ = [
    "BaseSpeech",
    "SpeechPort",
    "Utterance",
    "Voice",
    "VoicesChangedCallback",
    "VoiceResolver",
    "select_voice",
]
