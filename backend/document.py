"""Read-only document model the scoring engine queries.

The engine only talks to the PageDocument protocol. SoupDocument is the
BeautifulSoup-backed implementation built from fetched markup; tests can
supply any other object with the same attributes and methods.
"""

import logging
from typing import Optional, Protocol
from urllib.parse import urlparse

import soupsieve
from bs4 import BeautifulSoup

from errors import ParseError

logger = logging.getLogger(__name__)


class PageDocument(Protocol):
    """What the criterion evaluators are allowed to ask of a page."""

    url: str
    text: str  # lowercase visible text, for keyword matching
    markup: str  # lowercase raw markup, for schema/marker detection
    plain_text: str  # original-case visible text, for readability
    raw_length: int
    title: str

    def count(self, selector: str) -> int:
        ...

    def attribute(self, selector: str, name: str) -> Optional[str]:
        ...

    def external_link_count(self) -> int:
        ...


class SoupDocument:
    """PageDocument over a parsed BeautifulSoup tree."""

    __slots__ = ("url", "text", "markup", "plain_text", "raw_length", "title", "_soup", "_host")

    def __init__(self, soup: BeautifulSoup, raw_html: str, url: str = "") -> None:
        self._soup = soup
        self._host = (urlparse(url).hostname or "").lower()
        self.url = url

        body = soup.body or soup
        self.plain_text = body.get_text(separator=" ")
        self.text = self.plain_text.lower()
        self.markup = raw_html.lower()
        self.raw_length = len(raw_html)
        self.title = soup.title.get_text() if soup.title else ""

    def _select(self, selector: str) -> list:
        try:
            return self._soup.select(selector)
        except soupsieve.SelectorSyntaxError:
            logger.debug("Unsupported selector %r, treating as no match", selector)
            return []

    def count(self, selector: str) -> int:
        return len(self._select(selector))

    def attribute(self, selector: str, name: str) -> Optional[str]:
        """Return `name` from the first element matching `selector`, if set."""
        matches = self._select(selector)
        if not matches:
            return None
        value = matches[0].get(name)
        if isinstance(value, list):
            value = " ".join(value)
        return value

    def external_link_count(self) -> int:
        """Count absolute links that point at a different host than the page."""
        total = 0
        for anchor in self._soup.find_all("a", href=True):
            href = (anchor["href"] or "").strip()
            if not href.lower().startswith("http"):
                continue
            try:
                host = (urlparse(href).hostname or "").lower()
            except ValueError:
                continue
            if host and host != self._host:
                total += 1
        return total


def empty_document(url: str = "") -> SoupDocument:
    return SoupDocument(BeautifulSoup("", "html.parser"), "", url=url)


def build_document(html: str, url: str = "") -> SoupDocument:
    """
    Parse `html` into a SoupDocument.
    Markup the parser cannot handle degrades to an empty document.
    """
    raw_html = html or ""
    try:
        soup = BeautifulSoup(raw_html, "html.parser")
    except Exception as exc:
        error = ParseError(f"Could not parse markup from {url or '<unknown>'}: {exc}")
        logger.warning("PARSE ERROR: %s; scoring an empty document", error)
        return empty_document(url)
    return SoupDocument(soup, raw_html, url=url)
