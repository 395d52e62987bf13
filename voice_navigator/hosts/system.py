"""
System Speech - Speech host over the platform TTS via pyttsx3.

pyttsx3 drives SAPI5 on Windows, NSSpeechSynthesizer on macOS and
eSpeak on Linux. It has no voice-list-changed event, so the voice list
is read once per get_voices() call and the notification never fires.

Playback runs pyttsx3's loop to completion (runAndWait), which blocks;
hosts that need a responsive UI should drive this from a worker.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from voice_navigator.errors import SpeechEngineError
from voice_navigator.speech.base import BaseSpeech, Utterance, Voice

logger = logging.getLogger(__name__)

try:
    import pyttsx3
    PYTTSX3_AVAILABLE = True
except ImportError:
    pyttsx3 = None
    PYTTSX3_AVAILABLE = False


# pyttsx3 rates are words per minute; browsers treat 1.0 as normal speed.
BASE_WORDS_PER_MINUTE = 200


def _voice_lang(raw: Any) -> str:
    """Normalize a pyttsx3 voice's languages entry to a locale tag.
    
    Drivers report either strings ("ko_KR") or bytes with a leading
    priority byte (b"\\x05ko").
    """
    languages = getattr(raw, "languages", None) or []
    if not languages:
        return ""
    lang = languages[0]
    if isinstance(lang, bytes):
        lang = lang[1:].decode("utf-8", errors="ignore")
    return str(lang).replace("_", "-")


class SystemSpeech(BaseSpeech):
    """Speech host backed by the operating system's TTS engine."""
    
    def __init__(self, engine: Any = None) -> None:
        super().__init__()
        if engine is None:
            if not PYTTSX3_AVAILABLE:
                raise SpeechEngineError("init", "pyttsx3 is not installed")
            engine = pyttsx3.init()
        self._engine = engine
        self._voices_by_uri: dict[str, Voice] = {}
    
    def get_voices(self) -> list[Voice]:
        try:
            raw_voices = self._engine.getProperty("voices") or []
            default_id = self._engine.getProperty("voice")
        except Exception as e:
            logger.error(f"pyttsx3 get_voices failed: {e}")
            raise SpeechEngineError("get_voices", str(e)) from e
        
        voices = []
        for raw in raw_voices:
            voice = Voice(
                name=raw.name,
                lang=_voice_lang(raw),
                default=(raw.id == default_id),
                local_service=True,
                voice_uri=raw.id,
            )
            voices.append(voice)
        self._voices_by_uri = {v.voice_uri: v for v in voices}
        return voices
    
    def speak(self, utterance: Utterance) -> None:
        try:
            self._engine.setProperty("rate", int(BASE_WORDS_PER_MINUTE * utterance.rate))
            if utterance.voice is not None and utterance.voice.voice_uri:
                self._engine.setProperty("voice", utterance.voice.voice_uri)
            self._engine.say(utterance.text)
            self._engine.runAndWait()
        except Exception as e:
            logger.error(f"pyttsx3 speak failed: {e}")
            raise SpeechEngineError("speak", str(e)) from e
    
    def cancel(self) -> None:
        try:
            self._engine.stop()
        except Exception as e:
            logger.error(f"pyttsx3 cancel failed: {e}")
            raise SpeechEngineError("cancel", str(e)) from e
