"""Command line entry point: print or send the ACE train status."""

import argparse
import logging
import sys
from typing import List, Optional

from .config import Settings, get_settings
from .exceptions import ACEStatusError
from .feed_cache import FeedCache
from .feed_client import RemoteFeedClient, SeedFeedClient
from .notifier import WebhookNotifier
from .status_service import SKIPPED, StatusService

logger = logging.getLogger(__name__)

STATUS_ACTION = "status"


def build_service(settings: Settings) -> StatusService:
    """Wire a StatusService from settings."""
    if settings.use_seed:
        client = SeedFeedClient()
    else:
        client = RemoteFeedClient(base_url=settings.feed_url, timeout=settings.http_timeout)

    notifier = WebhookNotifier(
        key=settings.ifttt_key,
        event=settings.ifttt_event,
        timeout=settings.http_timeout,
    )
    return StatusService(FeedCache(client.fetch, ttl=settings.feed_cache_ttl), notifier=notifier)


def print_status(service: StatusService, settings: Settings) -> None:
    status = service.get_status(settings.status_options())
    print(status if status else "No trains running")


def send_status(service: StatusService, settings: Settings) -> None:
    result = service.send_status(settings.status_options())
    if result == SKIPPED:
        print("No trains running. Status not sent.")
    else:
        print("Status Sent Successfully")


def main(argv: Optional[List[str]] = None, settings: Optional[Settings] = None) -> int:
    parser = argparse.ArgumentParser(description="ACE train status")
    parser.add_argument(
        "action",
        nargs="?",
        default="send",
        help="'status' prints the current status; anything else sends it to the IFTTT webhook",
    )
    args = parser.parse_args(argv)

    settings = settings or get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    service = build_service(settings)
    try:
        if args.action == STATUS_ACTION:
            print_status(service, settings)
        else:
            send_status(service, settings)
    except ACEStatusError as e:
        logger.error(f"Failed to {args.action} status: {e}")
        print(str(e), file=sys.stderr)
    except Exception as e:
        logger.exception(f"Unexpected error during {args.action}: {e}")
        print(f"Unexpected error: {e}", file=sys.stderr)
    finally:
        service.cleanup()

    return 0


if __name__ == "__main__":
    sys.exit(main())
