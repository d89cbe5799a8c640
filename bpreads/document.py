import logging
from typing import List, Optional, Protocol

import requests
from bs4 import BeautifulSoup, Tag

from . import config_defaults as config
from .errors import FetchError, ParseError

logger = logging.getLogger(__name__)


class Element(Protocol):
    """A single node returned by a document query."""

    def text(self) -> str:
        ...

    def attr(self, name: str) -> Optional[str]:
        ...


class DocumentQuery(Protocol):
    """
    The only view of a parsed page the scraping core relies on.

    Implementations select elements by a CSS path and expose their text and
    attributes; nothing else about the underlying parser leaks through.
    """

    url: Optional[str]

    def select(self, selector: str) -> List[Element]:
        ...


class SoupElement:
    """`Element` backed by a BeautifulSoup tag."""

    def __init__(self, tag: Tag):
        self._tag = tag

    def text(self) -> str:
        return self._tag.get_text()

    def attr(self, name: str) -> Optional[str]:
        value = self._tag.get(name)
        if isinstance(value, list): # multi-valued attributes such as class
            return ' '.join(value)
        return value

    def __repr__(self) -> str:
        return f"SoupElement({self._tag.name!r})"


class SoupDocument:
    """`DocumentQuery` backed by a BeautifulSoup tree."""

    def __init__(self, soup: BeautifulSoup, url: Optional[str] = None):
        self.soup = soup
        self.url = url

    @classmethod
    def from_html(cls, html, url: Optional[str] = None, encoding: Optional[str] = None) -> 'SoupDocument':
        """Parses raw HTML (str or bytes) into a document."""
        try:
            if isinstance(html, bytes):
                soup = BeautifulSoup(html, 'html.parser', from_encoding=encoding)
            else:
                soup = BeautifulSoup(html, 'html.parser')
        except Exception as e:
            raise ParseError(url or '<html>', f"could not parse HTML: {e}") from e
        return cls(soup, url=url)

    def select(self, selector: str) -> List[SoupElement]:
        return [SoupElement(tag) for tag in self.soup.select(selector)]


class DocumentFetcher:
    """Fetches URLs over HTTP and parses them into `SoupDocument`s."""

    def __init__(self, timeout: float = config.REQUEST_TIMEOUT, session: Optional[requests.Session] = None):
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({'User-Agent': config.DEFAULT_USER_AGENT})

    def fetch(self, url: str) -> SoupDocument:
        """
        Fetches `url` and returns the parsed document.

        Raises:
            FetchError: On transport errors or a non-2xx status.
            ParseError: If the body cannot be parsed.
        """
        logger.debug(f"Fetching {url}")
        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            raise FetchError(url, str(e)) from e

        # requests assumes ISO-8859-1 for text/* without a charset; only trust a declared one
        # and otherwise let BeautifulSoup sniff the bytes (<meta charset>, BOM)
        content_type = response.headers.get('Content-Type', '')
        encoding = response.encoding if 'charset=' in content_type.lower() else None
        return SoupDocument.from_html(response.content, url=url, encoding=encoding)
