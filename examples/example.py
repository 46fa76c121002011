"""Example usage of StatusService."""

import logging
import sys
from pathlib import Path

# Add src to path so we can import acestatus
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from acestatus import FeedCache, RemoteFeedClient, SeedFeedClient, StatusOptions, StatusService
from acestatus.exceptions import ACEStatusError
from acestatus.formatter import next_stop_text, time_text

# Set up logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger(__name__)


def print_trains(service: StatusService, destination: str = None):
    """
    Fetch and display every in-service train.

    Args:
        service: Status service to query.
        destination: Optional stop name to show the ETA to (e.g., "San Jose").
    """
    print(f"\n{'='*70}")
    print("ACE trains in service")
    print(f"{'='*70}\n")

    trains = service.get_trains(StatusOptions(destination_name=destination))
    if not trains:
        print("  No trains running")
        return

    for train in trains:
        print(f"Train {train.schedule_number} (car {train.equipment_id}): {time_text(train)}")
        print(f"  {next_stop_text(train)}")
        for eta in train.etas:
            print(f"    {eta.display_name:<22} {eta.scheduled_time or '-':>8}  {eta.status_text or 'unknown'}")
        print()


if __name__ == "__main__":
    # Pass --seed to use the bundled snapshots instead of the live service
    offline = "--seed" in sys.argv[1:]
    args = [arg for arg in sys.argv[1:] if arg != "--seed"]

    client = SeedFeedClient() if offline else RemoteFeedClient()
    service = StatusService(FeedCache(client.fetch))
    try:
        print_trains(service, destination=" ".join(args) or None)
        print("Stop filter for San Jose:")
        print(f"  {service.get_status(StatusOptions(stop_name_filter='San Jose')) or 'No trains running'}")
    except ACEStatusError as e:
        logger.error(f"Failed to fetch status: {e}")
        sys.exit(1)
    finally:
        service.cleanup()
