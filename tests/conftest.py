"""Shared fixtures for the navigator tests."""

from __future__ import annotations

import pytest

from voice_navigator import NavigatorConfig, ScreenReaderSimulator
from voice_navigator.testing import MockScheduler, MockSpeech, create_gift_page


@pytest.fixture
def config() -> NavigatorConfig:
    return NavigatorConfig.english()


@pytest.fixture
def speech() -> MockSpeech:
    return MockSpeech()


@pytest.fixture
def scheduler() -> MockScheduler:
    return MockScheduler()


@pytest.fixture
def page():
    return create_gift_page()


@pytest.fixture
def sim(speech, page, config, scheduler):
    simulator = ScreenReaderSimulator(speech, keyboard=page, config=config, scheduler=scheduler)
    yield simulator
    simulator.close()
