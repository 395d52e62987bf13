"""
Testing utilities.

Components:
    MockSpeech      - Recording speech host with failure injection
    MockScheduler   - Manual-clock timer source
    create_gift_page, GIFT_PAGE_HTML, SAMPLE_VOICES - sample hosts

Usage:
    from voice_navigator.testing import MockSpeech, create_gift_page

    speech = MockSpeech()
    doc = create_gift_page()
    sim = ScreenReaderSimulator(speech, keyboard=doc)
    sim.activate(doc.body)
"""

from voice_navigator.testing.mock import (
    CallRecord,
    MockScheduler,
    MockSpeech,
    MockTimer,
)
from voice_navigator.testing.fixtures import (
    GIFT_PAGE_HTML,
    SAMPLE_GIFTS,
    SAMPLE_VOICES,
    create_gift_page,
)

__all__ = [
    "CallRecord",
    "MockScheduler",
    "MockSpeech",
    "MockTimer",
    "GIFT_PAGE_HTML",
    "SAMPLE_GIFTS",
    "SAMPLE_VOICES",
    "create_gift_page",
]
