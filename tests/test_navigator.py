"""Tests for the focus navigator state machine."""

import pytest

from voice_navigator.dom import Document, Element
from voice_navigator.navigator import Command, FocusNavigator, NavigatorState
from voice_navigator.scanner import ElementScanner


class RecordingAnnouncer:
    def __init__(self):
        self.announced = []
    
    def announce(self, element):
        self.announced.append(element)


def make_buttons(count):
    doc = Document()
    clicks = []
    for i in range(count):
        button = doc.append(Element("button", {"type": "button"}, f"Button {i}"))
        button.add_event_listener("click", lambda event, i=i: clicks.append(i))
    return ElementScanner().scan(doc), clicks


@pytest.fixture
def announcer():
    return RecordingAnnouncer()


class TestNavigatorState:
    """Tests for NavigatorState."""
    
    def test_defaults(self):
        state = NavigatorState()
        assert state.current_index == -1
        assert state.is_idle
        assert state.current is None
        assert not state.is_active


class TestTraversal:
    """Tests for NEXT / PREVIOUS."""
    
    def test_load_starts_idle(self, announcer):
        elements, _ = make_buttons(3)
        nav = FocusNavigator(announcer)
        nav.load(elements)
        
        assert nav.current_index == -1
        assert nav.state.is_active
        assert announcer.announced == []
    
    def test_first_next_lands_on_zero(self, announcer):
        elements, _ = make_buttons(3)
        nav = FocusNavigator(announcer)
        nav.load(elements)
        
        assert nav.dispatch(Command.NEXT) is True
        assert nav.current_index == 0
        assert announcer.announced == [elements[0]]
    
    def test_first_previous_steps_back_from_minus_one(self, announcer):
        elements, _ = make_buttons(3)
        nav = FocusNavigator(announcer)
        nav.load(elements)
        
        nav.dispatch(Command.PREVIOUS)
        
        assert nav.current_index == (-1 - 1 + 3) % 3
        assert nav.current_index == 1
        assert announcer.announced == [elements[1]]
    
    @pytest.mark.parametrize("count,expected", [(1, 0), (2, 0), (5, 3)])
    def test_first_previous_from_idle(self, announcer, count, expected):
        elements, _ = make_buttons(count)
        nav = FocusNavigator(announcer)
        nav.load(elements)
        
        assert nav.dispatch(Command.PREVIOUS) is True
        assert nav.current_index == expected
    
    def test_next_wraps(self, announcer):
        elements, _ = make_buttons(3)
        nav = FocusNavigator(announcer)
        nav.load(elements)
        
        for _ in range(4):
            nav.dispatch(Command.NEXT)
        
        assert nav.current_index == 0
    
    def test_previous_wraps(self, announcer):
        elements, _ = make_buttons(3)
        nav = FocusNavigator(announcer)
        nav.load(elements)
        nav.dispatch(Command.NEXT)
        
        nav.dispatch(Command.PREVIOUS)
        
        assert nav.current_index == 2
    
    @pytest.mark.parametrize("count", [1, 2, 5])
    @pytest.mark.parametrize("start", [0, 1, 4])
    def test_n_nexts_return_to_start(self, announcer, count, start):
        elements, _ = make_buttons(count)
        nav = FocusNavigator(announcer)
        nav.load(elements)
        for _ in range(start % count + 1):
            nav.dispatch(Command.NEXT)
        origin = nav.current_index
        
        for _ in range(count):
            nav.dispatch(Command.NEXT)
        
        assert nav.current_index == origin
    
    @pytest.mark.parametrize("count", [1, 2, 5])
    def test_previous_undoes_next_and_vice_versa(self, announcer, count):
        elements, _ = make_buttons(count)
        nav = FocusNavigator(announcer)
        nav.load(elements)
        
        for index in range(count):
            while nav.current_index != index:
                nav.dispatch(Command.NEXT)
            nav.dispatch(Command.NEXT)
            nav.dispatch(Command.PREVIOUS)
            assert nav.current_index == index
            nav.dispatch(Command.PREVIOUS)
            nav.dispatch(Command.NEXT)
            assert nav.current_index == index
    
    def test_single_element_announces_every_time(self, announcer):
        elements, _ = make_buttons(1)
        nav = FocusNavigator(announcer)
        nav.load(elements)
        
        nav.dispatch(Command.NEXT)
        nav.dispatch(Command.NEXT)
        nav.dispatch(Command.PREVIOUS)
        
        assert nav.current_index == 0
        assert len(announcer.announced) == 3
    
    def test_announces_once_per_move(self, announcer):
        elements, _ = make_buttons(3)
        nav = FocusNavigator(announcer)
        nav.load(elements)
        
        nav.dispatch(Command.NEXT)
        nav.dispatch(Command.NEXT)
        nav.dispatch(Command.PREVIOUS)
        
        assert announcer.announced == [elements[0], elements[1], elements[0]]
    
    def test_without_announcer(self):
        elements, _ = make_buttons(2)
        nav = FocusNavigator()
        nav.load(elements)
        
        assert nav.dispatch(Command.NEXT) is True
        assert nav.current_index == 0


class TestActivate:
    """Tests for ACTIVATE."""
    
    def test_activates_focused_element(self, announcer):
        elements, clicks = make_buttons(3)
        nav = FocusNavigator(announcer)
        nav.load(elements)
        nav.dispatch(Command.NEXT)
        nav.dispatch(Command.NEXT)
        
        assert nav.dispatch(Command.ACTIVATE) is True
        
        assert clicks == [1]
        assert nav.current_index == 1
        assert len(announcer.announced) == 2
    
    def test_idle_activate_is_noop(self, announcer):
        elements, clicks = make_buttons(3)
        nav = FocusNavigator(announcer)
        nav.load(elements)
        
        assert nav.dispatch(Command.ACTIVATE) is False
        assert clicks == []
        assert nav.current_index == -1
    
    def test_activation_error_is_absorbed(self, announcer):
        doc = Document()
        button = doc.append(Element("button", None, "Broken"))
        
        def explode(event):
            raise RuntimeError("boom")
        
        button.add_event_listener("click", explode)
        nav = FocusNavigator(announcer)
        nav.load(ElementScanner().scan(doc))
        nav.dispatch(Command.NEXT)
        
        assert nav.dispatch(Command.ACTIVATE) is False
        assert nav.current_index == 0


class TestEmptyFocusSet:
    """Commands with nothing scanned."""
    
    @pytest.mark.parametrize("command", list(Command))
    def test_noop(self, announcer, command):
        nav = FocusNavigator(announcer)
        nav.load(())
        
        assert nav.dispatch(command) is False
        assert nav.current_index == -1
        assert announcer.announced == []
    
    def test_after_clear(self, announcer):
        elements, clicks = make_buttons(2)
        nav = FocusNavigator(announcer)
        nav.load(elements)
        nav.dispatch(Command.NEXT)
        
        nav.clear()
        
        assert nav.dispatch(Command.ACTIVATE) is False
        assert nav.dispatch(Command.NEXT) is False
        assert nav.elements == ()
        assert not nav.state.is_active
        assert clicks == []
