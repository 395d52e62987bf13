"""
Element Scanner - Discover the focusable elements of a container.

Each scanned element keeps a borrowed reference to its host node. Label
and state are read from the node whenever they are needed, so a radio
that was just activated announces its new state and a button whose text
changed is announced with the new text. The scanner never writes to a
node.

Label precedence:
    1. aria-label attribute
    2. Radio inputs: text of the <label for="id"> element
    3. The element's own trimmed text
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, Optional

from voice_navigator.dom.base import Container, HostNode

if TYPE_CHECKING:
    from voice_navigator.config import NavigatorConfig

logger = logging.getLogger(__name__)


class Role(Enum):
    """Interactive element kinds."""
    BUTTON = auto()
    LINK = auto()
    RADIO = auto()


@dataclass(frozen=True)
class ElementDescription:
    """What the announcer says about an element."""
    state: str
    label: str
    role: str


def classify(node: HostNode) -> Optional[Role]:
    """Map a host node to its role, or None if it is not focusable."""
    tag = node.tag_name.lower()
    if tag == "button":
        return Role.BUTTON
    if tag == "a" and node.get_attribute("href") is not None:
        return Role.LINK
    if tag == "input" and node.input_type == "radio":
        return Role.RADIO
    return None


@dataclass(frozen=True, eq=False)
class FocusableElement:
    """A focusable host node and its role.
    
    Attributes:
        node: Borrowed host node
        role: Role assigned at scan time
        container: Container the node was scanned from (label lookups)
    """
    node: HostNode
    role: Role
    container: Optional[Container] = None
    
    @property
    def label(self) -> str:
        aria_label = self.node.get_attribute("aria-label")
        if aria_label:
            return aria_label.strip()
        
        if self.role == Role.RADIO and self.container is not None:
            label = self.container.find_label(self.node.element_id)
            if label is not None:
                return label.text_content.strip()
        
        return (self.node.text_content or "").strip()
    
    @property
    def checked(self) -> Optional[bool]:
        """Checked status for radios, None for other roles."""
        if self.role != Role.RADIO:
            return None
        return bool(self.node.checked)
    
    def describe(self, config: "NavigatorConfig") -> ElementDescription:
        """Resolve the spoken state, label and role from the live node."""
        checked = self.checked
        if checked is None:
            state = ""
        else:
            state = config.checked_label if checked else config.unchecked_label
        return ElementDescription(
            state=state,
            label=self.label,
            role=config.role_labels[self.role],
        )
    
    def activate(self) -> None:
        """Trigger the node's native activation (a click)."""
        self.node.click()


class ElementScanner:
    """Builds the ordered element snapshot for one activation session."""
    
    def scan(self, container: Optional[Container]) -> tuple[FocusableElement, ...]:
        """Scan a container for focusable elements.
        
        Args:
            container: Container to scan; None yields an empty session
        
        Returns:
            Focusable elements in document order
        """
        if container is None:
            logger.debug("No container to scan; starting with no elements")
            return ()
        
        elements = []
        for node in container.query_interactive():
            role = classify(node)
            if role is None:
                continue
            elements.append(FocusableElement(node=node, role=role, container=container))
        
        logger.debug(f"Scanned {len(elements)} focusable elements")
        return tuple(elements)
