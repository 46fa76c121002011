"""Tests for the feed clients and the IFTTT notifier."""

import unittest
from unittest.mock import MagicMock
import sys
from pathlib import Path

import requests

# Add src to path so we can import acestatus
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from acestatus.exceptions import MissingCredentialsError, NotificationError, UpstreamFetchError
from acestatus.feed_client import ACE_FEED_URL, RemoteFeedClient, SeedFeedClient
from acestatus.notifier import WebhookNotifier


def mock_session(payload=None, error=None):
    session = MagicMock(spec=requests.Session)
    response = session.get.return_value
    response.json.return_value = payload
    if error is not None:
        response.raise_for_status.side_effect = error
    return session


class TestRemoteFeedClient(unittest.TestCase):
    """Test fetching from the ACE status service."""

    def test_fetch_unwraps_service_key(self):
        """The records are read from the object keyed by the service name."""
        session = mock_session({"get_stops": [{"id": 1, "name": "Stockton"}]})
        client = RemoteFeedClient(session=session, timeout=5)

        records = client.fetch("get_stops")

        self.assertEqual(records, [{"id": 1, "name": "Stockton"}])
        session.get.assert_called_once_with(ACE_FEED_URL, params={"service": "get_stops"}, timeout=5)

    def test_fetch_accepts_bare_list(self):
        client = RemoteFeedClient(session=mock_session([{"equipmentID": "4101"}]))
        self.assertEqual(client.fetch("get_vehicles"), [{"equipmentID": "4101"}])

    def test_fetch_unexpected_payload(self):
        client = RemoteFeedClient(session=mock_session({"get_stops": None}))
        with self.assertRaises(UpstreamFetchError):
            client.fetch("get_stops")

    def test_fetch_http_error(self):
        client = RemoteFeedClient(session=mock_session(error=requests.HTTPError("503 Server Error")))
        with self.assertRaises(UpstreamFetchError):
            client.fetch("get_vehicles")

    def test_fetch_connection_error(self):
        session = MagicMock(spec=requests.Session)
        session.get.side_effect = requests.ConnectionError("connection refused")
        client = RemoteFeedClient(session=session)

        with self.assertRaises(UpstreamFetchError) as ctx:
            client.fetch("get_vehicles")
        self.assertIsInstance(ctx.exception.__cause__, requests.ConnectionError)

    def test_fetch_invalid_json(self):
        session = mock_session()
        session.get.return_value.json.side_effect = ValueError("Expecting value")
        client = RemoteFeedClient(session=session)

        with self.assertRaises(UpstreamFetchError):
            client.fetch("get_stops")


class TestSeedFeedClient(unittest.TestCase):
    """Test the bundled offline snapshots."""

    def test_fetch_seed_feeds(self):
        client = SeedFeedClient()

        stops = client.fetch("get_stops")
        vehicles = client.fetch("get_vehicles")

        self.assertEqual(stops[0]["name"], "Stockton")
        self.assertTrue(any(vehicle["inService"] for vehicle in vehicles))

    def test_fetch_unknown_feed(self):
        with self.assertRaises(UpstreamFetchError):
            SeedFeedClient().fetch("get_alerts")

    def test_missing_seed_dir(self):
        with self.assertRaises(UpstreamFetchError):
            SeedFeedClient(seed_dir=Path("/nonexistent")).fetch("get_stops")


class TestWebhookNotifier(unittest.TestCase):
    """Test posting to IFTTT."""

    def test_post(self):
        session = MagicMock(spec=requests.Session)
        notifier = WebhookNotifier(key="abc123", event="ace_status", session=session)

        notifier.post("Train 01 is On Time.")

        session.post.assert_called_once_with(
            "https://maker.ifttt.com/trigger/ace_status/with/key/abc123",
            json={"value1": "Train 01 is On Time."},
            timeout=10.0,
        )

    def test_missing_credentials(self):
        """Credentials are checked at send time, before any request."""
        session = MagicMock(spec=requests.Session)
        for key, event in (("", ""), ("abc123", ""), ("", "ace_status")):
            notifier = WebhookNotifier(key=key, event=event, session=session)
            with self.assertRaises(MissingCredentialsError):
                notifier.post("status")
        session.post.assert_not_called()

    def test_post_failure(self):
        session = MagicMock(spec=requests.Session)
        session.post.side_effect = requests.Timeout("read timed out")
        notifier = WebhookNotifier(key="abc123", event="ace_status", session=session)

        with self.assertRaises(NotificationError) as ctx:
            notifier.post("status")
        self.assertNotIn("abc123", str(ctx.exception))

    def test_post_rejected(self):
        session = MagicMock(spec=requests.Session)
        session.post.return_value.raise_for_status.side_effect = requests.HTTPError("401 Unauthorized")
        notifier = WebhookNotifier(key="abc123", event="ace_status", session=session)

        with self.assertRaises(NotificationError):
            notifier.post("status")


if __name__ == "__main__":
    unittest.main()
