"""
In-memory DOM - A small element tree with native activation behavior.

Enough of the browser's model to host the simulator outside a browser:
    - Attributes, text and children in document order
    - Radio groups (checking one radio unchecks the rest of its name)
    - Submit buttons submitting their enclosing form
    - Disabled buttons ignoring clicks
    - Links recording the followed href on their document

Example:
    doc = Document()
    form = doc.append(Element("form"))
    form.append(Element("input", {"type": "radio", "id": "g0", "name": "gift"}))
    form.append(Element("label", {"for": "g0"}, "Gift A"))
    form.append(Element("button", {"type": "submit"}, "Send"))
"""

from __future__ import annotations

from typing import Iterator, Optional, Union

from voice_navigator.dom.events import DomEvent, EventTarget


Child = Union["Element", str]


class Element(EventTarget):
    """An element node."""
    
    def __init__(
        self,
        tag: str,
        attributes: Optional[dict[str, str]] = None,
        *children: Child,
    ) -> None:
        super().__init__()
        self.tag = tag.lower()
        self.attributes: dict[str, str] = dict(attributes or {})
        self.children: list[Child] = []
        self.parent: Optional[Element] = None
        self._checked = "checked" in self.attributes
        for child in children:
            self.append(child)
    
    def __repr__(self) -> str:
        ident = f"#{self.element_id}" if self.element_id else ""
        return f"<{self.tag}{ident}>"
    
    # --- tree -------------------------------------------------------------
    
    def append(self, child: Child) -> Child:
        """Append a child element or text run and return it."""
        if isinstance(child, Element):
            child.parent = self
        self.children.append(child)
        return child
    
    def iter_elements(self) -> Iterator["Element"]:
        """Descendant elements in document (pre-)order, excluding self."""
        for child in self.children:
            if isinstance(child, Element):
                yield child
                yield from child.iter_elements()
    
    @property
    def root(self) -> "Element":
        node = self
        while node.parent is not None:
            node = node.parent
        return node
    
    def closest(self, tag: str) -> Optional["Element"]:
        """Nearest ancestor (or self) with the given tag."""
        node: Optional[Element] = self
        while node is not None:
            if node.tag == tag:
                return node
            node = node.parent
        return None
    
    def get_element_by_id(self, element_id: str) -> Optional["Element"]:
        for element in self.iter_elements():
            if element.element_id == element_id:
                return element
        return None
    
    # --- HostNode ---------------------------------------------------------
    
    @property
    def tag_name(self) -> str:
        return self.tag
    
    @property
    def text_content(self) -> str:
        parts: list[str] = []
        for child in self.children:
            parts.append(child.text_content if isinstance(child, Element) else child)
        return "".join(parts)
    
    @text_content.setter
    def text_content(self, value: str) -> None:
        for child in self.children:
            if isinstance(child, Element):
                child.parent = None
        self.children = [value] if value else []
    
    @property
    def input_type(self) -> str:
        if self.tag != "input":
            return ""
        return self.attributes.get("type", "text").lower()
    
    @property
    def element_id(self) -> str:
        return self.attributes.get("id", "")
    
    @property
    def disabled(self) -> bool:
        return "disabled" in self.attributes
    
    @disabled.setter
    def disabled(self, value: bool) -> None:
        if value:
            self.attributes["disabled"] = ""
        else:
            self.attributes.pop("disabled", None)
    
    @property
    def checked(self) -> bool:
        return self._checked
    
    @checked.setter
    def checked(self, value: bool) -> None:
        self._checked = bool(value)
    
    def get_attribute(self, name: str) -> Optional[str]:
        return self.attributes.get(name)
    
    def set_attribute(self, name: str, value: str) -> None:
        self.attributes[name] = value
    
    def click(self) -> None:
        """Fire "click" and run the default action unless prevented."""
        if self.disabled and self.tag in ("button", "input"):
            return
        
        event = DomEvent("click", target=self)
        if not self.dispatch_event("click", event):
            return
        
        if self.input_type == "radio":
            self._check_in_group()
        elif self.tag == "button" and self.attributes.get("type", "submit") == "submit":
            form = self.closest("form")
            if form is not None:
                form.dispatch_event("submit", DomEvent("submit", target=form))
        elif self.tag == "a" and "href" in self.attributes:
            root = self.root
            if isinstance(root, Document):
                root.location = self.attributes["href"]
    
    def _check_in_group(self) -> None:
        name = self.attributes.get("name")
        if name:
            for element in self.root.iter_elements():
                if (
                    element is not self
                    and element.input_type == "radio"
                    and element.attributes.get("name") == name
                ):
                    element.checked = False
        self.checked = True
    
    # --- Container --------------------------------------------------------
    
    def query_interactive(self) -> list["Element"]:
        """Anchors with an href, buttons and radio inputs, in document order."""
        return [e for e in self.iter_elements() if _is_interactive(e)]
    
    def find_label(self, for_id: str) -> Optional["Element"]:
        if not for_id:
            return None
        for element in self.root.iter_elements():
            if element.tag == "label" and element.attributes.get("for") == for_id:
                return element
        return None


class Document(Element):
    """Root of an element tree; also the keyboard event source."""
    
    def __init__(self, *children: Child) -> None:
        super().__init__("#document", None, *children)
        self.location: Optional[str] = None
    
    def __repr__(self) -> str:
        return "<#document>"
    
    @property
    def body(self) -> Element:
        """The <body> element, or the document itself for fragments."""
        for element in self.iter_elements():
            if element.tag == "body":
                return element
        return self


def _is_interactive(element: Element) -> bool:
    if element.tag == "a":
        return "href" in element.attributes
    if element.tag == "button":
        return True
    return element.input_type == "radio"
