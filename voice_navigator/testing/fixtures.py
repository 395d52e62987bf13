"""
Test fixtures - Sample pages and voices.
"""

from __future__ import annotations

from typing import Sequence

from voice_navigator.dom.memory import Document, Element
from voice_navigator.speech.base import Voice


SAMPLE_GIFTS = (
    "Gift A",
    "Gift B",
    "Gift C",
)

SAMPLE_VOICES = (
    Voice(name="Google 한국의", lang="ko-KR", default=True, local_service=False),
    Voice(name="유나", lang="ko-KR", local_service=True),
    Voice(name="Samantha", lang="en-US", local_service=True),
)


def create_gift_page(
    gifts: Sequence[str] = SAMPLE_GIFTS,
    back_label: str = "Back",
    submit_text: str = "Send gift",
) -> Document:
    """Build the gift mission screen: a back button, one radio per gift
    with a <label for>, and a submit button, all inside one form.
    """
    doc = Document()
    body = doc.append(Element("body"))
    form = body.append(Element("form"))
    form.append(Element("button", {"type": "button", "aria-label": back_label}, back_label))
    
    fieldset = form.append(Element("fieldset"))
    fieldset.append(Element("legend", None, "Gifts"))
    for index, gift in enumerate(gifts):
        row = fieldset.append(Element("div"))
        row.append(Element("input", {
            "type": "radio",
            "id": f"gift-{index}",
            "name": "gift",
            "value": gift,
        }))
        row.append(Element("label", {"for": f"gift-{index}"}, gift))
    
    form.append(Element("button", {"type": "submit"}, submit_text))
    return doc


GIFT_PAGE_HTML = """\
<!doctype html>
<html>
  <body>
    <div id="mission">
      <form>
        <button type="button" aria-label="Back">Back</button>
        <fieldset>
          <legend>Gifts</legend>
          <div><input type="radio" id="gift-0" name="gift" value="Gift A">
               <label for="gift-0">Gift A</label></div>
          <div><input type="radio" id="gift-1" name="gift" value="Gift B" checked>
               <label for="gift-1">Gift B</label></div>
        </fieldset>
        <a href="/console">  Console  </a>
        <a>Not a link</a>
        <input type="text" name="name">
        <button type="submit">Send gift</button>
      </form>
    </div>
  </body>
</html>
"""
