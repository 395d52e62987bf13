"""
Speech hosts.

    ToneSpeech    - Offline tone renderer (numpy, optional WAV output)
    SystemSpeech  - Platform TTS through pyttsx3 (optional)
"""

from voice_navigator.hosts.tone import RenderedUtterance, ToneSpeech, TONE_VOICES
from voice_navigator.hosts.system import SystemSpeech, PYTTSX3_AVAILABLE

__all__ = [
    "RenderedUtterance",
    "ToneSpeech",
    "TONE_VOICES",
    "SystemSpeech",
    "PYTTSX3_AVAILABLE",
]
