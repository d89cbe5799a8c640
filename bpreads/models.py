from dataclasses import dataclass, asdict
from typing import Dict, List, NamedTuple


class Candidate(NamedTuple):
    """A post link read from the blog index page."""
    display_text: str
    target_url: str


@dataclass
class ArticleRecord:
    """One article quoted in a reads post."""
    url: str
    title: str = ""

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


@dataclass(frozen=True)
class TitleResolution:
    """
    Outcome of resolving a single article title.

    `tier` records which strategy produced the title: 'hostile', 'document',
    'page' or 'fallback'. It is kept for logging only; the payload carries
    just the title.
    """
    title: str
    tier: str

    @property
    def is_fallback(self) -> bool:
        return self.tier == 'fallback'


@dataclass
class RunResult:
    """Everything a finished run computed."""
    post_url: str
    articles: List[ArticleRecord]
    payload: str
