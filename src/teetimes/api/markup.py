"""
HTML navigation helpers for the tee times application.

Pages are parsed with BeautifulSoup's ``html.parser`` backend, which
tolerates the malformed markup the reservation site serves. Attributes are
kept as raw strings so that ``class`` can be compared as written.
"""

from collections.abc import Iterable

from bs4 import BeautifulSoup
from bs4 import Tag

from teetimes.exceptions import MarkupError
from teetimes.utils.logging_utils import get_logger

logger = get_logger(__name__)

HTML_PARSER = "html.parser"

def parse_document(content: bytes) -> BeautifulSoup:
    """Parse raw HTML into a traversable document.

    Raises:
        MarkupError: If the content cannot be interpreted as HTML
    """
    if not content or not content.strip():
        raise MarkupError("Could not load HTML: empty document")

    try:
        return BeautifulSoup(content, HTML_PARSER, multi_valued_attributes=None)
    except Exception as e:
        logger.debug(f"Parsing {len(content)} bytes failed: {e}")
        raise MarkupError(f"Could not load HTML: {e!s}") from e

def find_form_by_name(document: BeautifulSoup, name: str) -> Tag | None:
    """Find the first form with the given name and a non-empty action."""
    for form in document.find_all("form"):
        if form.get("name") != name:
            continue
        if not form.get("action"):
            continue
        return form
    return None

def find_element_by_id(document: BeautifulSoup, element_id: str) -> Tag | None:
    """Find the element with the given id."""
    element = document.find(id=element_id)
    return element if isinstance(element, Tag) else None

def class_attribute(element: Tag) -> str:
    """Get the raw ``class`` attribute value of an element."""
    value = element.get("class")
    if value is None:
        return ""
    if isinstance(value, list):
        return " ".join(value)
    return value

def find_children_by_tag_and_class(element: Tag, tag: str, class_names: Iterable[str]) -> list[Tag]:
    """Find descendants of a tag whose class attribute equals one of the given names.

    The whole attribute is compared, so ``"tt_av other"`` does not match ``"tt_av"``.
    """
    allowed = set(class_names)
    return [child for child in element.find_all(tag) if class_attribute(child) in allowed]

def element_text(element: Tag) -> str:
    """Get the trimmed text content of an element."""
    return element.get_text().strip()
