"""Error types raised by acestatus."""


class ACEStatusError(Exception):
    """Base class for all acestatus errors."""


class UpstreamFetchError(ACEStatusError):
    """A remote feed could not be fetched or decoded."""


class NotificationError(ACEStatusError):
    """The notification webhook did not accept the status."""


class MissingCredentialsError(NotificationError):
    """A notification was requested without a webhook key or event."""


class InvalidArgumentError(ACEStatusError, ValueError):
    """An empty or missing name was passed to a name-based lookup."""


class StopNotFoundError(ACEStatusError, LookupError):
    """No stop matches the requested id or name."""
