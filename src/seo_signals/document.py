"""Read-only accessor over a parsed HTML document."""

from typing import List, Optional, Union

from bs4 import BeautifulSoup
from bs4.element import Tag

from seo_signals.exceptions import MalformedInputError


DEFAULT_PARSER = "lxml"


class Document:
    """Queryable view of one parsed HTML page.

    Selection uses CSS selectors and always returns elements in document
    order. Attribute reads follow the "first match wins" convention: when
    several elements match, only the first one is consulted, and a first
    match without the attribute yields None.
    """

    def __init__(self, soup: BeautifulSoup):
        if not isinstance(soup, BeautifulSoup):
            raise MalformedInputError(
                f"Expected a parsed BeautifulSoup tree, got {type(soup).__name__}"
            )
        self._soup = soup

    @classmethod
    def from_html(cls, html: Union[str, bytes], parser: str = DEFAULT_PARSER) -> "Document":
        """Parse raw markup into a Document.

        Args:
            html: HTML markup
            parser: BeautifulSoup tree builder name

        Returns:
            Document wrapping the parsed tree
        """
        if not isinstance(html, (str, bytes)):
            raise MalformedInputError(
                f"Expected HTML markup, got {type(html).__name__}"
            )
        return cls(BeautifulSoup(html, parser))

    @property
    def soup(self) -> BeautifulSoup:
        return self._soup

    def select(self, selector: str) -> List[Tag]:
        """All elements matching a CSS selector, in document order."""
        return self._soup.select(selector)

    def select_one(self, selector: str) -> Optional[Tag]:
        return self._soup.select_one(selector)

    def text(self, selector: str) -> str:
        """Concatenated text of every matching element (not trimmed)."""
        return "".join(element_text(el) for el in self.select(selector))

    def attr(self, selector: str, name: str) -> Optional[str]:
        """Attribute of the first element matching the selector."""
        element = self.select_one(selector)
        if element is None:
            return None
        return element_attr(element, name)

    def body_text(self) -> str:
        """All descendant text of <body>, concatenated in document order."""
        body = self._soup.body
        if body is None:
            return ""
        return element_text(body)


def element_text(element: Tag) -> str:
    return element.get_text()


def element_attr(element: Tag, name: str) -> Optional[str]:
    value = element.get(name)
    if isinstance(value, list):
        # Multi-valued attributes (rel, class) come back as token lists
        return " ".join(value)
    return value


def ensure_document(document: Union[Document, BeautifulSoup]) -> Document:
    """Wrap a bare BeautifulSoup tree; reject anything else."""
    if isinstance(document, Document):
        return document
    return Document(document)
