import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from . import config_defaults as config
from .errors import ConfigError


@dataclass
class Settings:
    """Runtime configuration for a reads job."""
    blog_url: str = config.DEFAULT_BLOG_URL
    post_url: Optional[str] = None # skips the index search when set

    # Mailgun delivery
    mailgun_sandbox_id: str = ""
    mailgun_api_key: str = ""
    email_address: str = ""

    request_timeout: float = config.REQUEST_TIMEOUT

    @property
    def mailgun_configured(self) -> bool:
        return bool(self.mailgun_sandbox_id and self.mailgun_api_key and self.email_address)

    @classmethod
    def from_env(cls, load_dotenv_file: bool = True) -> 'Settings':
        """Load configuration from environment variables (and a .env file, if present)."""
        if load_dotenv_file:
            load_dotenv()
        timeout = os.getenv('REQUEST_TIMEOUT')
        try:
            request_timeout = float(timeout) if timeout else config.REQUEST_TIMEOUT
        except ValueError as e:
            raise ConfigError(f"REQUEST_TIMEOUT must be a number of seconds, got {timeout!r}") from e
        return cls(
            blog_url=os.getenv('BLOG_URL', config.DEFAULT_BLOG_URL),
            post_url=os.getenv('POST_URL') or None,
            mailgun_sandbox_id=os.getenv('MAILGUN_SANDBOX_ID', ''),
            mailgun_api_key=os.getenv('MAILGUN_API_KEY', ''),
            email_address=os.getenv('EMAIL_ADDRESS', ''),
            request_timeout=request_timeout,
        )
