"""Tests for the element scanner."""

from voice_navigator import NavigatorConfig
from voice_navigator.dom import Document, Element, load_html
from voice_navigator.scanner import ElementScanner, Role, classify
from voice_navigator.testing import GIFT_PAGE_HTML, create_gift_page


class TestScan:
    """Tests for ElementScanner.scan()."""
    
    def test_document_order_and_roles(self):
        doc = create_gift_page(gifts=["Gift A", "Gift B"])
        elements = ElementScanner().scan(doc.body)
        
        assert [e.role for e in elements] == [
            Role.BUTTON,
            Role.RADIO,
            Role.RADIO,
            Role.BUTTON,
        ]
    
    def test_missing_container_gives_empty_scan(self):
        assert ElementScanner().scan(None) == ()
    
    def test_skips_non_interactive(self):
        doc = load_html(GIFT_PAGE_HTML)
        elements = ElementScanner().scan(doc.body)
        
        labels = [e.label for e in elements]
        assert labels == ["Back", "Gift A", "Gift B", "Console", "Send gift"]
        assert "Not a link" not in labels
    
    def test_scan_is_scoped_to_container(self):
        doc = Document()
        outside = doc.append(Element("button", None, "Outside"))
        inside = doc.append(Element("div"))
        inside.append(Element("button", None, "Inside"))
        
        elements = ElementScanner().scan(inside)
        
        assert [e.label for e in elements] == ["Inside"]
        assert all(e.node is not outside for e in elements)
    
    def test_snapshot_is_immutable(self):
        doc = create_gift_page()
        elements = ElementScanner().scan(doc.body)
        assert isinstance(elements, tuple)


class TestClassify:
    """Tests for role classification."""
    
    def test_anchor_requires_href(self):
        assert classify(Element("a", {"href": "#"})) == Role.LINK
        assert classify(Element("a")) is None
    
    def test_inputs(self):
        assert classify(Element("input", {"type": "radio"})) == Role.RADIO
        assert classify(Element("input", {"type": "RADIO"})) == Role.RADIO
        assert classify(Element("input", {"type": "checkbox"})) is None
        assert classify(Element("input")) is None
    
    def test_button(self):
        assert classify(Element("button")) == Role.BUTTON


class TestLabels:
    """Tests for label resolution."""
    
    def _first(self, doc):
        return ElementScanner().scan(doc)[0]
    
    def test_aria_label_wins(self):
        doc = Document(Element("button", {"aria-label": "Go back"}, "<"))
        assert self._first(doc).label == "Go back"
    
    def test_radio_uses_label_for(self):
        doc = Document(
            Element("input", {"type": "radio", "id": "g0"}),
            Element("label", {"for": "g0"}, "  Gift A "),
        )
        assert self._first(doc).label == "Gift A"
    
    def test_radio_aria_label_beats_label_element(self):
        doc = Document(
            Element("input", {"type": "radio", "id": "g0", "aria-label": "Special"}),
            Element("label", {"for": "g0"}, "Gift A"),
        )
        assert self._first(doc).label == "Special"
    
    def test_radio_label_found_outside_container(self):
        doc = Document()
        group = doc.append(Element("div"))
        group.append(Element("input", {"type": "radio", "id": "g0"}))
        doc.append(Element("label", {"for": "g0"}, "Gift A"))
        
        assert ElementScanner().scan(group)[0].label == "Gift A"
    
    def test_radio_without_label(self):
        doc = Document(Element("input", {"type": "radio", "id": "g0"}))
        assert self._first(doc).label == ""
    
    def test_trimmed_text_content(self):
        doc = Document(Element("button", None, "  Send ", Element("span", None, "gift  ")))
        assert self._first(doc).label == "Send gift"
    
    def test_label_is_read_live(self):
        button = Element("button", None, "Send gift")
        doc = Document(button)
        element = self._first(doc)
        
        button.text_content = "Sending"
        
        assert element.label == "Sending"


class TestDescribe:
    """Tests for FocusableElement.describe()."""
    
    def test_radio_state(self):
        config = NavigatorConfig.english()
        radio = Element("input", {"type": "radio", "id": "g0"})
        doc = Document(radio, Element("label", {"for": "g0"}, "Gift A"))
        element = ElementScanner().scan(doc)[0]
        
        assert element.describe(config).state == "unchecked"
        radio.checked = True
        
        description = element.describe(config)
        assert (description.state, description.label, description.role) == (
            "checked",
            "Gift A",
            "radio button",
        )
    
    def test_default_labels_are_korean(self):
        config = NavigatorConfig(locale="ko-KR")
        radio = Element("input", {"type": "radio", "id": "g0", "checked": ""})
        doc = Document(radio, Element("a", {"href": "/x"}, "Console"))
        link = ElementScanner().scan(doc)[1]
        
        assert ElementScanner().scan(doc)[0].describe(config).state == "선택됨"
        assert link.describe(config).role == "링크"
    
    def test_non_radio_has_empty_state(self):
        config = NavigatorConfig.english()
        doc = Document(Element("button", None, "Send"))
        element = ElementScanner().scan(doc)[0]
        
        assert element.checked is None
        assert element.describe(config).state == ""
