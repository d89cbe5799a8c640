import logging
from typing import Optional

from .document import DocumentFetcher
from .errors import DeliveryError
from .models import RunResult
from .notifier import Notifier, RunMode, select_notifier
from .scraper import assemble_articles, extract_article_urls, locate_post, serialize_articles
from .settings import Settings
from .titles import TitleResolver

logger = logging.getLogger(__name__)


def run_job(settings: Settings, mode: RunMode = RunMode.DELIVER,
            fetcher: Optional[DocumentFetcher] = None,
            notifier: Optional[Notifier] = None) -> RunResult:
    """
    Runs one reads job from the blog index to delivery.

    The workflow:
    1. Locate the reads post (configured post URL, or the first matching link on the blog index)
    2. Extract the quoted article links from the post
    3. Resolve a title for each link, one at a time
    4. Serialize and hand the payload to the notifier

    Raises:
        FetchError/ParseError: If the blog index or the post cannot be loaded.
        NotFoundError: If the index has no reads post.
        DeliveryError: If the notifier fails; `result` holds the computed run.
    """
    fetcher = fetcher or DocumentFetcher(timeout=settings.request_timeout)

    index_document = None
    if not settings.post_url:
        logger.info(f"Loading blog index {settings.blog_url}")
        index_document = fetcher.fetch(settings.blog_url)
    post_url = locate_post(index_document, override_url=settings.post_url)

    post_document = fetcher.fetch(post_url)
    urls = extract_article_urls(post_document)

    resolver = TitleResolver(fetcher)
    articles = assemble_articles(urls, resolver.title_for)
    result = RunResult(post_url=post_url, articles=articles, payload=serialize_articles(articles))
    logger.info(f"Assembled {len(articles)} articles from {post_url}")

    notifier = notifier or select_notifier(mode, settings)
    try:
        notifier.deliver(result.payload, post_url)
    except DeliveryError as e:
        logger.error(f"Delivery failed after computing {len(articles)} articles: {e}")
        e.result = result
        raise
    return result
