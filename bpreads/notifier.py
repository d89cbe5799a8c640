"""Delivery of the finished reads payload."""
import enum
import logging
import sys
import time
from typing import Optional, Protocol, TextIO

import requests

from . import config_defaults as config
from .errors import DeliveryError
from .settings import Settings

logger = logging.getLogger(__name__)


class RunMode(enum.Enum):
    """Where a run's result ends up."""
    LOCAL = 'local'      # print to the console
    DELIVER = 'deliver'  # send through the configured channel


class Notifier(Protocol):
    def deliver(self, payload: str, source_post_url: str) -> None:
        ...


class ConsoleNotifier:
    """Writes the payload to a stream (stdout by default)."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream

    def deliver(self, payload: str, source_post_url: str) -> None:
        stream = self.stream or sys.stdout
        logger.info(f"Writing reads from {source_post_url} to console")
        try:
            stream.write(payload + '\n')
            stream.flush()
        except OSError as e:
            raise DeliveryError(f"Could not write payload to console: {e}") from e


class MailgunNotifier:
    """Sends the payload as a plain-text e-mail through a Mailgun sandbox domain."""

    def __init__(self, sandbox_id: str, api_key: str, email_address: str,
                 timeout: float = config.REQUEST_TIMEOUT, session: Optional[requests.Session] = None):
        self.sandbox_id = sandbox_id
        self.api_key = api_key
        self.email_address = email_address
        self.timeout = timeout
        self.session = session or requests.Session()

    @property
    def messages_url(self) -> str:
        return config.MAILGUN_MESSAGES_URL.format(sandbox_id=self.sandbox_id)

    def build_message(self, payload: str, source_post_url: str) -> dict:
        return {
            'from': config.MAILGUN_FROM.format(sandbox_id=self.sandbox_id),
            'to': f"<{self.email_address}>",
            'subject': f"{config.MAIL_SUBJECT_PREFIX} {int(time.time())}",
            'text': payload,
            'h:X-Source-Post': source_post_url,
        }

    def deliver(self, payload: str, source_post_url: str) -> None:
        """
        Posts the message to Mailgun.

        Raises:
            DeliveryError: On transport errors or a non-2xx response.
        """
        logger.info(f"Sending reads from {source_post_url} to {self.email_address}")
        try:
            response = self.session.post(
                self.messages_url,
                auth=('api', self.api_key),
                data=self.build_message(payload, source_post_url),
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            raise DeliveryError(f"Mailgun request failed: {e}") from e

        if response.status_code // 100 != 2:
            raise DeliveryError(f"Mailgun returned {response.status_code}: {response.text}")
        logger.info("Mailgun accepted the message.")


def select_notifier(mode: RunMode, settings: Settings, stream: Optional[TextIO] = None) -> Notifier:
    """Picks the notifier for a run; without Mailgun credentials the console is used."""
    if mode is RunMode.LOCAL:
        return ConsoleNotifier(stream)
    if not settings.mailgun_configured:
        logger.warning("Mailgun is not configured, writing result to console instead.")
        return ConsoleNotifier(stream)
    return MailgunNotifier(
        sandbox_id=settings.mailgun_sandbox_id,
        api_key=settings.mailgun_api_key,
        email_address=settings.email_address,
        timeout=settings.request_timeout,
    )
