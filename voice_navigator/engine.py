"""
Screen Reader Simulator - Wires the components to host input.

Lifecycle:
    construction        platform detection + voice resolution (once)
    set_active(c, True) scan c, reset to Idle, attach listeners
    key/touch events    -> Command -> FocusNavigator.dispatch()
    set_active(c, False) detach listeners, drop elements, cancel speech
    close()             deactivate + stop listening for voice changes

Keyboard and touch handlers feed the same dispatch() call, so the
navigator stays the only writer of the focus index whichever input the
command came from.
"""

from __future__ import annotations

import logging
from typing import Optional

from voice_navigator.announcer import Announcer
from voice_navigator.config import NavigatorConfig
from voice_navigator.dom.base import Container, KeyboardSource
from voice_navigator.dom.events import KeyEvent, TouchEvent
from voice_navigator.gestures import GestureTranslator
from voice_navigator.live import LiveRegion, Scheduler
from voice_navigator.navigator import Command, FocusNavigator, NavigatorState
from voice_navigator.platform import HostInfo, Platform
from voice_navigator.scanner import ElementScanner, FocusableElement
from voice_navigator.speech.base import SpeechPort, Voice
from voice_navigator.speech.voices import VoiceResolver

logger = logging.getLogger(__name__)


class ScreenReaderSimulator:
    """Sequential, spoken navigation over a container's controls.
    
    Example:
        doc = load_html(page)
        sim = ScreenReaderSimulator(speech, keyboard=doc)
        sim.set_active(doc.body, True)
        
        doc.dispatch_event("keydown", KeyEvent("ArrowRight"))  # first control
        doc.dispatch_event("keydown", KeyEvent("Enter"))       # clicks it
        
        sim.set_active(doc.body, False)
    """
    
    def __init__(
        self,
        speech: Optional[SpeechPort],
        keyboard: Optional[KeyboardSource] = None,
        host: Optional[HostInfo] = None,
        config: Optional[NavigatorConfig] = None,
        scheduler: Optional[Scheduler] = None,
    ) -> None:
        """Initialize the simulator.
        
        Args:
            speech: Host speech port (None runs silently)
            keyboard: Source of "keydown" events, usually the document
            host: Host identification strings for platform detection
            config: Navigator configuration (defaults if None)
            scheduler: Timer source for transient status messages
        """
        self.config = config or NavigatorConfig()
        self.host = host or HostInfo()
        self.platform: Platform = self.host.detect()
        
        self._keyboard = keyboard
        self._voices = VoiceResolver(speech, self.platform, self.config)
        self._announcer = Announcer(speech, self.config, lambda: self._voices.voice)
        self._navigator = FocusNavigator(self._announcer)
        self._scanner = ElementScanner()
        self._gestures = GestureTranslator.from_config(self.config)
        self._live = LiveRegion(self._announcer, scheduler)
        
        self._container: Optional[Container] = None
        self._active = False
        self._closed = False
    
    # --- read-only views ----------------------------------------------------
    
    @property
    def is_active(self) -> bool:
        return self._active
    
    @property
    def state(self) -> NavigatorState:
        return self._navigator.state
    
    @property
    def current_index(self) -> int:
        return self._navigator.current_index
    
    @property
    def elements(self) -> tuple[FocusableElement, ...]:
        return self._navigator.elements
    
    @property
    def voice(self) -> Optional[Voice]:
        return self._voices.voice
    
    @property
    def announcer(self) -> Announcer:
        return self._announcer
    
    @property
    def status_message(self) -> str:
        return self._live.message
    
    # --- activation contract -----------------------------------------------
    
    def set_active(self, container: Optional[Container], active: bool) -> None:
        """Follow the host's active flag; only edges have an effect."""
        if active:
            self.activate(container)
        else:
            self.deactivate()
    
    def activate(self, container: Optional[Container]) -> None:
        """Scan the container and start listening for input.
        
        Re-activating an active engine on another container ends the
        current session first; activating on the same container again
        is a no-op.
        """
        if self._closed:
            logger.warning("Ignoring activate on a closed simulator")
            return
        if self._active:
            if container is self._container:
                return
            self.deactivate()
        
        self._container = container
        self._navigator.load(self._scanner.scan(container))
        self._gestures.reset()
        self._attach()
        self._active = True
        logger.debug(f"Activated with {len(self.elements)} elements")
    
    def deactivate(self) -> None:
        """Detach listeners, drop the session and silence speech. Idempotent."""
        if not self._active:
            return
        self._active = False
        self._detach()
        self._container = None
        self._navigator.clear()
        self._live.clear()
        self._announcer.cancel()
        logger.debug("Deactivated")
    
    def close(self) -> None:
        """Deactivate and stop listening for voice-list changes."""
        self.deactivate()
        self._voices.close()
        self._closed = True
    
    def _attach(self) -> None:
        if self._keyboard is not None:
            self._keyboard.add_event_listener("keydown", self.handle_key)
        if self._container is not None:
            self._container.add_event_listener("touchstart", self.handle_touch_start)
            self._container.add_event_listener("touchend", self.handle_touch_end)
    
    def _detach(self) -> None:
        if self._keyboard is not None:
            self._keyboard.remove_event_listener("keydown", self.handle_key)
        if self._container is not None:
            self._container.remove_event_listener("touchstart", self.handle_touch_start)
            self._container.remove_event_listener("touchend", self.handle_touch_end)
    
    # --- input --------------------------------------------------------------
    
    def dispatch(self, command: Command) -> bool:
        """Feed one command to the navigator."""
        if not self._active:
            return False
        return self._navigator.dispatch(command)
    
    def handle_key(self, event: KeyEvent) -> None:
        command = self.config.key_bindings.get(event.key)
        if command is None:
            return
        event.prevent_default()
        self.dispatch(command)
    
    def handle_touch_start(self, event: TouchEvent) -> None:
        self._gestures.touch_start(event.x, event.y)
    
    def handle_touch_end(self, event: TouchEvent) -> None:
        command = self._gestures.touch_end(event.x, event.y, event.timestamp)
        if command is None:
            return
        event.prevent_default()
        self.dispatch(command)
    
    # --- status -------------------------------------------------------------
    
    def post_status(self, message: str, clear_after_ms: Optional[float] = None) -> None:
        """Speak a transient status message.
        
        Args:
            message: Status text
            clear_after_ms: Lifetime; defaults to config.status_clear_ms
        """
        if clear_after_ms is None:
            clear_after_ms = self.config.status_clear_ms
        self._live.post(message, clear_after_ms)
