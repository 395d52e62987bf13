"""
Voice Navigator - Screen-reader style navigation without a screen reader.

Turns arrow keys, Enter, swipes and double taps into sequential spoken
navigation over the buttons, links and radio inputs of a container.

Architecture:
    input (keys, touches) → Command → FocusNavigator → Announcer → SpeechPort

Public API (stable):
    ScreenReaderSimulator  - Main interface. set_active(container, True/False).
    NavigatorConfig        - Locale, speech rate, labels, gesture tuning.
    Command                - NEXT / PREVIOUS / ACTIVATE.

Modules:
    platform    - detect_platform(), HostInfo
    speech      - SpeechPort, Voice, Utterance, VoiceResolver
    dom         - HostNode/Container ports, events, in-memory DOM, load_html
    scanner     - ElementScanner, FocusableElement, Role
    navigator   - FocusNavigator, NavigatorState
    gestures    - GestureTranslator
    announcer   - Announcer, build_announcement
    live        - LiveRegion transient status messages
    hosts       - ToneSpeech, SystemSpeech
    testing     - MockSpeech, MockScheduler, sample pages

Example:
    from voice_navigator import ScreenReaderSimulator
    from voice_navigator.dom import KeyEvent, load_html
    from voice_navigator.hosts import ToneSpeech
    
    doc = load_html(open("mission.html").read())
    sim = ScreenReaderSimulator(ToneSpeech(), keyboard=doc)
    sim.set_active(doc.body, True)
    doc.dispatch_event("keydown", KeyEvent("ArrowRight"))
"""

from voice_navigator.announcer import Announcer, build_announcement
from voice_navigator.config import ENGLISH_LABELS, KOREAN_LABELS, NavigatorConfig
from voice_navigator.engine import ScreenReaderSimulator
from voice_navigator.errors import ConfigError, NavigatorError, SpeechEngineError
from voice_navigator.gestures import GestureState, GestureTranslator
from voice_navigator.navigator import Command, FocusNavigator, NavigatorState
from voice_navigator.platform import HostInfo, Platform, detect_platform
from voice_navigator.scanner import (
    ElementDescription,
    ElementScanner,
    FocusableElement,
    Role,
)
from voice_navigator.speech import SpeechPort, Utterance, Voice, VoiceResolver, select_voice

__version__ = "1.0.0"

__all__ = [
    # Engine
    "ScreenReaderSimulator",
    "NavigatorConfig",
    "KOREAN_LABELS",
    "ENGLISH_LABELS",
    # Components
    "Announcer",
    "build_announcement",
    "Command",
    "FocusNavigator",
    "NavigatorState",
    "GestureState",
    "GestureTranslator",
    "ElementDescription",
    "ElementScanner",
    "FocusableElement",
    "Role",
    # Platform & speech
    "HostInfo",
    "Platform",
    "detect_platform",
    "SpeechPort",
    "Utterance",
    "Voice",
    "VoiceResolver",
    "select_voice",
    # Errors
    "NavigatorError",
    "ConfigError",
    "SpeechEngineError",
    "__version__",
]
