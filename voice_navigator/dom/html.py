"""
HTML loading - Build an in-memory DOM from markup.

Uses BeautifulSoup with the stdlib "html.parser" backend so no compiled
parser is required.
"""

from __future__ import annotations

from pathlib import Path
from typing import Union

from bs4 import BeautifulSoup
from bs4.element import Comment, Declaration, Doctype, NavigableString, ProcessingInstruction, Tag

from voice_navigator.dom.memory import Document, Element


def load_html(markup: str) -> Document:
    """Parse HTML markup into a Document.
    
    Args:
        markup: HTML document or fragment
    
    Returns:
        Document whose children mirror the parsed tree
    """
    soup = BeautifulSoup(markup, "html.parser")
    document = Document()
    for child in soup.children:
        _convert(child, document)
    return document


def load_html_file(path: Union[str, Path]) -> Document:
    """Parse an HTML file (UTF-8) into a Document."""
    return load_html(Path(path).read_text(encoding="utf-8"))


def _convert(node, parent: Element) -> None:
    if isinstance(node, (Comment, Declaration, Doctype, ProcessingInstruction)):
        return
    if isinstance(node, NavigableString):
        text = str(node)
        if text:
            parent.append(text)
        return
    if not isinstance(node, Tag):
        return
    
    attributes = {
        name: " ".join(value) if isinstance(value, list) else (value or "")
        for name, value in node.attrs.items()
    }
    element = Element(node.name, attributes)
    parent.append(element)
    for child in node.children:
        _convert(child, element)
