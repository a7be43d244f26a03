# ABOUTME: Lenient HTML scanning for <img> elements in rich text
# ABOUTME: Uses BeautifulSoup's html.parser so editor-authored markup never raises

from bs4 import BeautifulSoup
from bs4.element import Tag


def load_html(html: str) -> BeautifulSoup:
    """Parse an HTML fragment, recovering silently from malformed markup."""
    return BeautifulSoup(html, "html.parser")


def extract_images(html: str) -> list[Tag]:
    """Return every <img> element in the fragment, at any nesting depth."""
    return [image for image in load_html(html).find_all("img") if isinstance(image, Tag)]


def extract_image_attributes(image: Tag) -> dict[str, str]:
    """Collect the attributes of an <img> element as ``name -> value``."""
    attributes = {}
    for name, value in image.attrs.items():
        # bs4 splits multi-valued attributes such as class into lists
        if isinstance(value, list):
            value = " ".join(value)
        attributes[name] = value
    return attributes
