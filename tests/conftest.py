"""Shared pytest fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from bpreads.document import SoupDocument
from bpreads.errors import FetchError

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def _read_fixture(name: str) -> str:
    return (FIXTURES_DIR / name).read_text(encoding="utf-8")


class FakeFetcher:
    """Serves canned HTML by URL; unknown URLs fail like an unreachable host."""

    def __init__(self, pages: dict[str, str] | None = None):
        self.pages = dict(pages or {})
        self.calls: list[str] = []

    def fetch(self, url: str) -> SoupDocument:
        self.calls.append(url)
        if url not in self.pages:
            raise FetchError(url, "connection refused")
        return SoupDocument.from_html(self.pages[url], url=url)


class RecordingNotifier:
    def __init__(self):
        self.deliveries: list[tuple[str, str]] = []

    def deliver(self, payload: str, source_post_url: str) -> None:
        self.deliveries.append((payload, source_post_url))


@pytest.fixture
def index_html() -> str:
    return _read_fixture("index.html")


@pytest.fixture
def post_html() -> str:
    return _read_fixture("post.html")


@pytest.fixture
def index_document(index_html) -> SoupDocument:
    return SoupDocument.from_html(index_html, url="https://blog.test/")


@pytest.fixture
def post_document(post_html) -> SoupDocument:
    return SoupDocument.from_html(post_html, url="https://blog.test/post1")


@pytest.fixture
def fake_fetcher():
    return FakeFetcher


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()
