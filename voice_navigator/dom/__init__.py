"""
DOM - Host element ports, events and an in-memory element tree.

    base    - HostNode, Container and KeyboardSource protocols
    events  - KeyEvent, TouchEvent, DomEvent, EventTarget
    memory  - Element/Document in-memory tree with native activation
    html    - load_html()/load_html_file() via BeautifulSoup
"""

from voice_navigator.dom.base import Container, HostNode, KeyboardSource
from voice_navigator.dom.events import (
    DomEvent,
    EventTarget,
    KeyEvent,
    Listener,
    TouchEvent,
)
from voice_navigator.dom.html import load_html, load_html_file
from voice_navigator.dom.memory import Document, Element

__all__ = [
    "Container",
    "HostNode",
    "KeyboardSource",
    "DomEvent",
    "EventTarget",
    "KeyEvent",
    "Listener",
    "TouchEvent",
    "Document",
    "Element",
    "load_html",
    "load_html_file",
]
