import json
import logging
from typing import Callable, Iterable, List, Optional
from urllib.parse import urljoin

from . import config_defaults as config
from .document import DocumentQuery
from .errors import NotFoundError
from .models import ArticleRecord, Candidate

logger = logging.getLogger(__name__)

# --- Post Location ---

def read_candidates(index_document: DocumentQuery) -> List[Candidate]:
    """Reads (display text, href) pairs from the post-title links of the blog index, in document order."""
    candidates = []
    for link in index_document.select(config.POST_TITLE_LINK_SELECTOR):
        # Theme puts the full post title in the title attribute; link text is a fallback
        display_text = link.attr('title') or link.text()
        candidates.append(Candidate(display_text=display_text.strip(), target_url=link.attr('href') or ''))
    return candidates


def is_reads_post_title(text: str) -> bool:
    """True for titles like '10 Tuesday AM Reads' or '10 Weekend Reads'."""
    text = text.lower()
    if config.READS_KEYWORD not in text:
        return False
    return any(keyword in text for keyword in config.READS_PERIOD_KEYWORDS)


def locate_post(index_document: Optional[DocumentQuery], override_url: Optional[str] = None) -> str:
    """
    Finds the URL of the current reads post on the blog index.

    Args:
        index_document: The parsed blog index page. Not read when an override is given.
        override_url: Post URL supplied through configuration; returned unchanged.

    Returns:
        The post URL.

    Raises:
        NotFoundError: If no post-title link matches.
    """
    if override_url:
        logger.info(f"Using configured post URL: {override_url}")
        return override_url

    if index_document is None:
        raise NotFoundError("No blog index document to search for a reads post.")

    for candidate in read_candidates(index_document):
        if not is_reads_post_title(candidate.display_text):
            continue
        if not candidate.target_url:
            logger.warning(f"Reads post '{candidate.display_text}' has no link target, skipping.")
            continue
        post_url = candidate.target_url
        if index_document.url:
            post_url = urljoin(index_document.url, post_url)
        logger.info(f"Found reads post '{candidate.display_text}': {post_url}")
        return post_url

    raise NotFoundError(f"No reads post found on {index_document.url or 'the blog index'}.")

# --- Article Extraction ---

def extract_article_urls(post_document: DocumentQuery) -> List[str]:
    """
    Returns the hrefs of links quoted in the post body, in document order.

    Duplicates are kept and nothing is validated; a post without quoted links
    yields an empty list.
    """
    urls = []
    for link in post_document.select(config.ARTICLE_LINK_SELECTOR):
        href = link.attr('href')
        if href is not None:
            urls.append(href)
    logger.info(f"Extracted {len(urls)} article links from {post_document.url or 'post'}")
    return urls

# --- Result Assembly ---

def assemble_articles(urls: Iterable[str], resolve: Callable[[str], str]) -> List[ArticleRecord]:
    """Builds one record per URL, resolving titles one at a time in order."""
    urls = list(urls)
    articles: List[ArticleRecord] = []
    for i, url in enumerate(urls):
        logger.info(f"Resolving title {i+1}/{len(urls)}: {url}")
        articles.append(ArticleRecord(url=url, title=resolve(url)))
    return articles


def serialize_articles(articles: Iterable[ArticleRecord]) -> str:
    """Renders records as the JSON array that gets delivered."""
    return json.dumps([article.to_dict() for article in articles], ensure_ascii=False)
