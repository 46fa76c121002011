"""Clients for the ACE train status feeds."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List

import requests

from .exceptions import UpstreamFetchError

logger = logging.getLogger(__name__)

# ACE train status service
ACE_FEED_URL = "https://www.acerail.com/CMSWebParts/ACERail/TrainStatusService.aspx"

VEHICLES_FEED = "get_vehicles"
STOPS_FEED = "get_stops"
FEED_NAMES = (VEHICLES_FEED, STOPS_FEED)

SEED_DIR = Path(__file__).parent / "seed_data"
SEED_FILES = {
    VEHICLES_FEED: "vehicles.json",
    STOPS_FEED: "stops.json",
}


class RemoteFeedClient:
    """Fetches feed records from the ACE train status service."""

    def __init__(self, base_url: str = ACE_FEED_URL, timeout: float = 10.0, session: requests.Session = None):
        """
        Initialize the client.

        Args:
            base_url: Status service endpoint; the feed is picked by the ``service`` query parameter.
            timeout: Seconds to wait for the service.
            session: Optional requests session to reuse connections.
        """
        self.base_url = base_url
        self.timeout = timeout
        self._session = session or requests.Session()

    def fetch(self, service_name: str) -> List[Any]:
        """
        Fetch the records of one feed.

        Args:
            service_name: "get_vehicles" or "get_stops".

        Returns:
            List of raw JSON records.

        Raises:
            UpstreamFetchError: On transport errors, error responses or unexpected bodies.
        """
        logger.debug(f"Requesting {service_name} from {self.base_url}")
        try:
            response = self._session.get(
                self.base_url,
                params={"service": service_name},
                timeout=self.timeout,
            )
            response.raise_for_status()
            data = response.json()
        except (requests.RequestException, ValueError) as e:
            raise UpstreamFetchError(f"Failed to fetch {service_name}: {e}") from e

        # The service wraps the records in an object keyed by the service name
        if isinstance(data, dict):
            data = data.get(service_name)
        if not isinstance(data, list):
            raise UpstreamFetchError(f"Unexpected {service_name} payload of type {type(data).__name__}")

        logger.info(f"Fetched {len(data)} records from {service_name}")
        return data

    def close(self) -> None:
        self._session.close()


class SeedFeedClient:
    """Serves the bundled seed snapshots instead of calling the service."""

    def __init__(self, seed_dir: Path = SEED_DIR):
        self.seed_dir = Path(seed_dir)
        self._records: Dict[str, List[Any]] = {}

    def fetch(self, service_name: str) -> List[Any]:
        if service_name not in SEED_FILES:
            raise UpstreamFetchError(f"No seed data for {service_name}")
        if service_name not in self._records:
            path = self.seed_dir / SEED_FILES[service_name]
            try:
                with open(path, "r", encoding="utf-8") as f:
                    self._records[service_name] = json.load(f)
            except (OSError, ValueError) as e:
                raise UpstreamFetchError(f"Failed to read seed data {path}: {e}") from e
            logger.info(f"Loaded seed data for {service_name} from {path}")
        return list(self._records[service_name])

    def close(self) -> None:
        pass
