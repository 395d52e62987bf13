"""
DOM Base - Ports for the host element tree.

The scanner reads interactive elements through these protocols instead
of a global document, so any element tree (the in-memory DOM here, a
browser bridge, a GUI toolkit) can host the simulator.
"""

from __future__ import annotations

from typing import Optional, Protocol, Sequence, runtime_checkable

from voice_navigator.dom.events import Listener


@runtime_checkable
class HostNode(Protocol):
    """A single element owned by the host."""
    
    @property
    def tag_name(self) -> str:
        """Lower-case tag name ("a", "button", "input", ...)."""
        ...
    
    @property
    def text_content(self) -> str:
        """Concatenated text of the element and its descendants."""
        ...
    
    @property
    def input_type(self) -> str:
        """Lower-case "type" of an input element, empty otherwise."""
        ...
    
    @property
    def checked(self) -> bool:
        ...
    
    @property
    def element_id(self) -> str:
        ...
    
    def get_attribute(self, name: str) -> Optional[str]:
        ...
    
    def click(self) -> None:
        """Run the element's native activation behavior."""
        ...


@runtime_checkable
class Container(Protocol):
    """The subtree the simulator navigates."""
    
    def query_interactive(self) -> Sequence[HostNode]:
        """Anchors with an href, buttons and radio inputs in document order."""
        ...
    
    def find_label(self, for_id: str) -> Optional[HostNode]:
        """The label element whose "for" attribute equals for_id."""
        ...
    
    def add_event_listener(self, event_type: str, listener: Listener) -> None:
        ...
    
    def remove_event_listener(self, event_type: str, listener: Listener) -> None:
        ...


@runtime_checkable
class KeyboardSource(Protocol):
    """Where key-down events come from (usually the document)."""
    
    def add_event_listener(self, event_type: str, listener: Listener) -> None:
        ...
    
    def remove_event_listener(self, event_type: str, listener: Listener) -> None:
        ...
