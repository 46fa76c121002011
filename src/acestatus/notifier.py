"""IFTTT webhook notification sink."""

import logging

import requests

from .exceptions import MissingCredentialsError, NotificationError

logger = logging.getLogger(__name__)

IFTTT_TRIGGER_URL = "https://maker.ifttt.com/trigger/{event}/with/key/{key}"


class WebhookNotifier:
    """
    Posts status text to an IFTTT Maker webhook as ``{"value1": message}``.

    The key and event are only checked when something is sent, so a notifier
    can be built for status-only runs without credentials.
    """

    def __init__(self, key: str = "", event: str = "", timeout: float = 10.0, session: requests.Session = None):
        self.key = key
        self.event = event
        self.timeout = timeout
        self._session = session or requests.Session()

    @property
    def url(self) -> str:
        return IFTTT_TRIGGER_URL.format(event=self.event, key=self.key)

    def post(self, message: str) -> None:
        """
        Send a message to the webhook.

        Raises:
            MissingCredentialsError: If the key or the event is not configured.
            NotificationError: If the webhook could not be reached or rejected the message.
        """
        if not self.key or not self.event:
            raise MissingCredentialsError("IFTTT event & key not provided")

        logger.info(f"Sending status to IFTTT event {self.event}")
        try:
            response = self._session.post(self.url, json={"value1": message}, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            # The key is part of the URL; keep it out of the message
            raise NotificationError(f"Failed to notify IFTTT event {self.event}: {type(e).__name__}") from e

    def close(self) -> None:
        self._session.close()
