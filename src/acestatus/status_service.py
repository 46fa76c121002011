"""Main ACE status service."""

import logging
from dataclasses import dataclass
from typing import List, Optional

from .enricher import EnrichOptions, VehicleEnricher
from .exceptions import MissingCredentialsError
from .feed_cache import FeedCache
from .feed_client import STOPS_FEED, VEHICLES_FEED
from .formatter import status_report, stop_filtered_status
from .models import Train
from .notifier import WebhookNotifier
from .stop_directory import StopDirectory

logger = logging.getLogger(__name__)

SENT = "sent"
SKIPPED = "skipped"


@dataclass(frozen=True)
class StatusOptions:
    """
    What the status text should contain.

    Attributes:
        destination_name: Stop name whose ETA is appended to each status line.
        stop_name_filter: If set, only report ETAs of trains to this stop.
    """
    destination_name: Optional[str] = None
    stop_name_filter: Optional[str] = None


class StatusService:
    """
    Computes ACE train status text and forwards it to a notifier.

    Both feeds are read through the shared FeedCache, so any number of
    concurrent status requests cost at most one upstream call per feed
    per TTL window.
    """

    def __init__(
        self,
        feed_cache: FeedCache,
        notifier: Optional[WebhookNotifier] = None,
        enricher: Optional[VehicleEnricher] = None,
    ):
        self.feed_cache = feed_cache
        self.notifier = notifier
        self.enricher = enricher or VehicleEnricher()

    def get_trains(self, options: Optional[StatusOptions] = None) -> List[Train]:
        """
        Get the in-service trains joined with the current stop snapshot.

        Raises:
            UpstreamFetchError: If either feed could not be fetched.
        """
        options = options or StatusOptions()

        # Start both fetches before waiting on either
        stops_future = self.feed_cache.get(STOPS_FEED)
        vehicles_future = self.feed_cache.get(VEHICLES_FEED)

        directory = StopDirectory.from_records(stops_future.result())
        vehicles = vehicles_future.result()

        return self.enricher.enrich(
            vehicles,
            directory,
            EnrichOptions(in_service_only=True, destination_name=options.destination_name),
        )

    def get_status(self, options: Optional[StatusOptions] = None) -> str:
        """
        Get the status text for all in-service trains.

        Returns:
            One status line per train, or the bracketed ETAs to the filter stop
            when ``stop_name_filter`` is set. Empty string if nothing to report.
        """
        options = options or StatusOptions()
        trains = self.get_trains(options)

        if options.stop_name_filter:
            status = stop_filtered_status(trains, options.stop_name_filter)
        else:
            status = status_report(trains)

        logger.debug(f"Computed status for {len(trains)} trains")
        return status

    def send_status(self, options: Optional[StatusOptions] = None) -> str:
        """
        Compute the status and post it to the notifier.

        Returns:
            "sent" if the status was delivered, "skipped" if there was nothing to send.

        Raises:
            UpstreamFetchError: If the feeds could not be fetched.
            NotificationError: If delivery failed or no credentials are configured.
        """
        status = self.get_status(options)
        if not status:
            logger.info("No trains running; status not sent")
            return SKIPPED

        if self.notifier is None:
            raise MissingCredentialsError("No notifier configured")
        self.notifier.post(status)
        logger.info("Status sent")
        return SENT

    def cleanup(self) -> None:
        """Release the feed cache workers."""
        self.feed_cache.shutdown(wait=False)
        if self.notifier:
            self.notifier.close()
        logger.debug("Cleaned up status service resources")
