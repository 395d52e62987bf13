"""
Navigator configuration.

Defaults reproduce the Korean gift-mission deployment: ko-KR speech at
rate 1.2, the "유나" system voice on Apple devices, 30 px swipes and a
300 ms double-tap window.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace

from voice_navigator.errors import ConfigError
from voice_navigator.navigator import Command
from voice_navigator.scanner import Role


KOREAN_LABELS: dict[Role, str] = {
    Role.BUTTON: "버튼",
    Role.LINK: "링크",
    Role.RADIO: "라디오 버튼",
}

ENGLISH_LABELS: dict[Role, str] = {
    Role.BUTTON: "button",
    Role.LINK: "link",
    Role.RADIO: "radio button",
}

DEFAULT_KEY_BINDINGS: dict[str, Command] = {
    "ArrowRight": Command.NEXT,
    "ArrowLeft": Command.PREVIOUS,
    "Enter": Command.ACTIVATE,
}


def _env_locale() -> str:
    return os.environ.get("VOICE_NAVIGATOR_LOCALE", "ko-KR")


def _env_rate() -> float:
    return float(os.environ.get("VOICE_NAVIGATOR_RATE", "1.2"))


@dataclass
class NavigatorConfig:
    """Configuration for the screen reader simulator.
    
    Args:
        locale: Target locale (BCP-47). Voices are matched against it and
            every utterance is tagged with it.
        speech_rate: Fixed speaking rate applied to every utterance.
        preferred_voice_names: Proper names of the preferred voice on
            iOS-like hosts, tried in order (native script, then romanized).
        swipe_threshold: Minimum horizontal travel in pixels for a swipe.
        double_tap_window_ms: Maximum gap between two taps that still
            counts as a double tap.
        separator: Joins the state, label and role of an announcement.
        role_labels: Spoken name of each role.
        checked_label: Spoken state of a checked radio input.
        unchecked_label: Spoken state of an unchecked radio input.
            Empty means the state is omitted.
        key_bindings: Keyboard key -> logical command.
        status_clear_ms: Default lifetime of a transient status message.
    
    Example:
        config = NavigatorConfig(
            locale="en-US",
            preferred_voice_names=("Samantha",),
            role_labels=ENGLISH_LABELS,
        )
    """
    
    locale: str = field(default_factory=_env_locale)
    speech_rate: float = field(default_factory=_env_rate)
    preferred_voice_names: tuple[str, ...] = ("유나", "Yuna")
    
    swipe_threshold: float = 30.0
    double_tap_window_ms: float = 300.0
    
    separator: str = ", "
    role_labels: dict[Role, str] = field(default_factory=lambda: dict(KOREAN_LABELS))
    checked_label: str = "선택됨"
    unchecked_label: str = ""
    
    key_bindings: dict[str, Command] = field(
        default_factory=lambda: dict(DEFAULT_KEY_BINDINGS)
    )
    status_clear_ms: float = 2000.0
    
    def __post_init__(self) -> None:
        """Validate configuration."""
        if not self.locale:
            raise ConfigError("locale", "locale must not be empty")
        if self.speech_rate <= 0:
            raise ConfigError("speech_rate", "speech_rate must be > 0")
        if self.swipe_threshold < 0:
            raise ConfigError("swipe_threshold", "swipe_threshold must be >= 0")
        if self.double_tap_window_ms <= 0:
            raise ConfigError("double_tap_window_ms", "double_tap_window_ms must be > 0")
        if self.status_clear_ms < 0:
            raise ConfigError("status_clear_ms", "status_clear_ms must be >= 0")
        missing = [role.name for role in Role if role not in self.role_labels]
        if missing:
            raise ConfigError("role_labels", f"role_labels missing {', '.join(missing)}")
        self.preferred_voice_names = tuple(self.preferred_voice_names)
    
    @classmethod
    def english(cls, **overrides) -> "NavigatorConfig":
        """English labels and en-US speech."""
        values = {
            "locale": "en-US",
            "preferred_voice_names": ("Samantha",),
            "role_labels": dict(ENGLISH_LABELS),
            "checked_label": "checked",
            "unchecked_label": "unchecked",
        }
        values.update(overrides)
        return cls(**values)
    
    def with_overrides(self, **overrides) -> "NavigatorConfig":
        """Copy of this config with some fields replaced."""
        return replace(self, **overrides)
