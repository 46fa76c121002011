"""acestatus - Real-time Altamont Corridor Express train status."""

__version__ = "0.1.0"

from .models import Stop, NextStopETA, Train, GeoPoint
from .feed_cache import FeedCache
from .stop_directory import StopDirectory
from .enricher import VehicleEnricher, EnrichOptions
from .status_service import StatusService, StatusOptions
from .feed_client import RemoteFeedClient, SeedFeedClient
from .notifier import WebhookNotifier
from .exceptions import (
    ACEStatusError,
    UpstreamFetchError,
    NotificationError,
    MissingCredentialsError,
    InvalidArgumentError,
    StopNotFoundError,
)

__all__ = [
    "StatusService",
    "StatusOptions",
    "FeedCache",
    "StopDirectory",
    "VehicleEnricher",
    "EnrichOptions",
    "RemoteFeedClient",
    "SeedFeedClient",
    "WebhookNotifier",
    "Stop",
    "NextStopETA",
    "Train",
    "GeoPoint",
    "ACEStatusError",
    "UpstreamFetchError",
    "NotificationError",
    "MissingCredentialsError",
    "InvalidArgumentError",
    "StopNotFoundError",
]
