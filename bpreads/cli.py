import argparse
import logging
from typing import List, Optional

from .errors import BpReadsError, ConfigError, DeliveryError
from .job import run_job
from .notifier import RunMode
from .settings import Settings

EXIT_OK = 0
EXIT_RUN_FAILED = 1
EXIT_DELIVERY_FAILED = 2


def save_payload_to_file(payload: str, filename: str) -> None:
    """Saves the JSON payload to a file."""
    logging.info(f"Saving payload to {filename}")
    with open(filename, 'w', encoding='utf-8') as f:
        f.write(payload)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Find the latest reads post on the blog, resolve titles for its quoted links and send them as JSON.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument("--post-url", help="Use this post instead of searching the blog index.", default=None)
    parser.add_argument("--blog-url", help="Blog index to search. Overrides BLOG_URL.", default=None)
    parser.add_argument("--local", help="Print the result instead of e-mailing it.", action="store_true")
    parser.add_argument("-o", "--output", help="Also write the JSON payload to this file.", default=None)
    parser.add_argument("-v", "--verbose", help="Enable debug logging.", action="store_true")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        logging.debug("Debug logging enabled.")

    try:
        settings = Settings.from_env()
    except ConfigError as e:
        logging.error(f"Configuration error: {e}")
        return EXIT_RUN_FAILED
    if args.post_url:
        settings.post_url = args.post_url
    if args.blog_url:
        settings.blog_url = args.blog_url
    mode = RunMode.LOCAL if args.local else RunMode.DELIVER

    try:
        result = run_job(settings, mode=mode)
    except DeliveryError as e:
        logging.error(f"Delivery error: {e}")
        if args.output and e.result is not None:
            save_payload_to_file(e.result.payload, args.output)
        return EXIT_DELIVERY_FAILED
    except BpReadsError as e:
        logging.error(f"Run failed: {e}")
        return EXIT_RUN_FAILED

    if args.output:
        save_payload_to_file(result.payload, args.output)
    return EXIT_OK


def lambda_handler(event, context) -> str:
    """
    Entry point for scheduled or event-triggered runs.

    Recognized event keys: `post_url` (skip the index search) and `local`
    (print instead of e-mailing). Errors propagate to the runtime.
    """
    logging.getLogger().setLevel(logging.INFO)
    event = event or {}
    settings = Settings.from_env()
    if event.get('post_url'):
        settings.post_url = event['post_url']
    mode = RunMode.LOCAL if event.get('local') else RunMode.DELIVER
    return run_job(settings, mode=mode).payload
