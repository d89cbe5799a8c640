"""Collects the article links of the latest reads post on a blog and delivers them with their titles."""
from .errors import BpReadsError, DeliveryError, FetchError, NotFoundError, ParseError
from .job import run_job
from .models import ArticleRecord, RunResult
from .notifier import RunMode
from .settings import Settings

__all__ = [
    'ArticleRecord',
    'BpReadsError',
    'DeliveryError',
    'FetchError',
    'NotFoundError',
    'ParseError',
    'RunMode',
    'RunResult',
    'Settings',
    'run_job',
]
