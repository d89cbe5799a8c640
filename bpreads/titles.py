import logging
import re
from typing import Iterable, Optional
from urllib.parse import urlparse

from . import config_defaults as config
from .document import DocumentFetcher
from .errors import FetchError
from .models import TitleResolution

logger = logging.getLogger(__name__)

_WORD_RE = re.compile(r'\w+')


def last_path_segment(url: str) -> str:
    """Everything after the final '/' of the URL, verbatim ('' for a trailing slash)."""
    return url.split('/')[-1]


def _title_case(text: str) -> str:
    # Upper-cases the first letter of each word and leaves the rest alone
    return _WORD_RE.sub(lambda m: m.group(0)[:1].upper() + m.group(0)[1:], text)


def slug_title(url: str) -> str:
    """
    Derives a title from the URL slug alone.

    Example:
        https://www.bloomberg.com/opinion/articles/2020-05-04/texas-versus-california-a-story-of-dueling-coronavirus-rules/
        -> 'Texas Versus California A Story Of Dueling Coronavirus Rules'
    """
    if url.endswith('/'):
        url = url[:-1]
    return _title_case(last_path_segment(url)).replace('-', ' ')


def is_hostile_url(url: str, hostile_domains: Iterable[str] = config.HOSTILE_DOMAINS) -> bool:
    """True if the URL's host is, or is a subdomain of, a domain that blocks scrapers."""
    try:
        host = (urlparse(url).hostname or '').lower()
    except ValueError: # malformed netloc, e.g. an unclosed IPv6 bracket
        return False
    return any(host == domain or host.endswith('.' + domain) for domain in hostile_domains)


class TitleResolver:
    """
    Resolves display titles for article URLs.

    Tiers, first match wins:
      1. hostile domains -> title from the URL slug, no network access
      2. PDFs -> the file name
      3. anything else -> the page's <title>, or the last path segment if the fetch fails

    Resolution never raises; a failed fetch only lowers the quality of the title.
    """

    def __init__(self, fetcher: Optional[DocumentFetcher] = None, hostile_domains: Iterable[str] = config.HOSTILE_DOMAINS):
        self.fetcher = fetcher or DocumentFetcher()
        self.hostile_domains = tuple(hostile_domains)

    def resolve(self, url: str) -> TitleResolution:
        try:
            return self._resolve(url)
        except Exception as e:
            logger.warning(f"Error resolving title for {url}: {e}. Falling back to last path segment for title.")
            return TitleResolution(last_path_segment(url), 'fallback')

    def _resolve(self, url: str) -> TitleResolution:
        if is_hostile_url(url, self.hostile_domains):
            logger.debug(f"Hostile domain, deriving title from URL: {url}")
            return TitleResolution(slug_title(url), 'hostile')

        if url.endswith(config.DOCUMENT_SUFFIX):
            logger.debug(f"Document link, using file name as title: {url}")
            return TitleResolution(last_path_segment(url), 'document')

        try:
            document = self.fetcher.fetch(url)
        except FetchError as e:
            logger.warning(f"{e}. Falling back to last path segment for title.")
            return TitleResolution(last_path_segment(url), 'fallback')

        titles = document.select('title')
        if not titles:
            logger.warning(f"No <title> element on {url}, leaving title empty.")
            return TitleResolution('', 'page')
        return TitleResolution(titles[0].text(), 'page')

    def title_for(self, url: str) -> str:
        """`resolve` reduced to the title string, for use with `assemble_articles`."""
        return self.resolve(url).title
