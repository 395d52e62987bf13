"""
Tone Speech - Offline speech host rendering utterances to PCM.

Stands in for a real synthesizer where none is available (CI, servers,
the CLI's --speech tone mode). Each utterance becomes a sine tone whose
duration follows the text length and speaking rate, and whose pitch is
derived from the voice name, so recordings of a navigation session can
be inspected or listened to.
"""

from __future__ import annotations

import hashlib
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional

import numpy as np
import soundfile as sf

from voice_navigator.errors import SpeechEngineError
from voice_navigator.speech.base import BaseSpeech, Utterance, Voice

logger = logging.getLogger(__name__)


TONE_VOICES: tuple[Voice, ...] = (
    Voice(name="Tone Korean", lang="ko-KR", default=True, voice_uri="tone:ko"),
    Voice(name="Tone English", lang="en-US", voice_uri="tone:en"),
)


@dataclass
class RenderedUtterance:
    """An utterance and the audio rendered for it."""
    utterance: Utterance
    audio: np.ndarray = field(repr=False)
    sample_rate: int
    path: Optional[Path] = None
    cancelled: bool = False
    
    @property
    def duration_seconds(self) -> float:
        return len(self.audio) / self.sample_rate


class ToneSpeech(BaseSpeech):
    """Speech host that renders sine tones instead of speech.
    
    Only the most recent utterance is ever "playing"; cancel() marks it
    cancelled, matching the browser's one-queue model.
    
    Example:
        speech = ToneSpeech(output_dir=Path("session"))
        sim = ScreenReaderSimulator(speech, keyboard=doc)
        ...
        for item in speech.history:
            print(item.utterance.text, item.path)
    """
    
    def __init__(
        self,
        voices: Optional[Iterable[Voice]] = None,
        sample_rate: int = 24000,
        output_dir: Optional[Path] = None,
        duration_per_char: float = 0.06,
        min_duration: float = 0.2,
    ) -> None:
        super().__init__()
        self._voices = list(voices) if voices is not None else list(TONE_VOICES)
        self.sample_rate = sample_rate
        self.output_dir = Path(output_dir) if output_dir is not None else None
        self.duration_per_char = duration_per_char
        self.min_duration = min_duration
        self.history: list[RenderedUtterance] = []
        self._pending: Optional[RenderedUtterance] = None
        
        if self.output_dir is not None:
            self.output_dir.mkdir(parents=True, exist_ok=True)
    
    @property
    def pending(self) -> Optional[RenderedUtterance]:
        """The utterance currently queued or playing."""
        return self._pending
    
    def get_voices(self) -> list[Voice]:
        return list(self._voices)
    
    def set_voices(self, voices: Iterable[Voice]) -> None:
        """Replace the voice list and notify the listener."""
        self._voices = list(voices)
        self.notify_voices_changed()
    
    def speak(self, utterance: Utterance) -> None:
        if not utterance.text:
            return
        
        audio = self.render(utterance)
        item = RenderedUtterance(utterance=utterance, audio=audio, sample_rate=self.sample_rate)
        
        if self.output_dir is not None:
            item.path = self.output_dir / f"utterance_{len(self.history):04d}.wav"
            try:
                sf.write(str(item.path), audio, self.sample_rate)
            except Exception as e:
                logger.error(f"Failed to write {item.path}: {e}")
                raise SpeechEngineError("speak", f"failed to write {item.path}: {e}") from e
        
        self.history.append(item)
        self._pending = item
    
    def cancel(self) -> None:
        if self._pending is not None:
            self._pending.cancelled = True
            self._pending = None
    
    def render(self, utterance: Utterance) -> np.ndarray:
        """Render an utterance to float32 PCM in [-1, 1]."""
        rate = utterance.rate if utterance.rate > 0 else 1.0
        duration = max(self.min_duration, len(utterance.text) * self.duration_per_char / rate)
        num_samples = int(duration * self.sample_rate)
        
        t = np.arange(num_samples, dtype=np.float32) / self.sample_rate
        audio = 0.3 * np.sin(2 * np.pi * self._frequency(utterance.voice) * t)
        
        # 10ms fades avoid clicks at the edges
        fade = min(num_samples // 2, int(0.01 * self.sample_rate))
        if fade > 0:
            ramp = np.linspace(0.0, 1.0, fade, dtype=np.float32)
            audio[:fade] *= ramp
            audio[-fade:] *= ramp[::-1]
        
        return audio.astype(np.float32)
    
    @staticmethod
    def _frequency(voice: Optional[Voice]) -> float:
        if voice is None:
            return 220.0
        digest = hashlib.md5(voice.name.encode("utf-8")).digest()
        return 180.0 + digest[0]  # 180-435 Hz
