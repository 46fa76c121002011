"""Environment-sourced settings for acestatus."""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from .feed_cache import DEFAULT_TTL_SECONDS
from .feed_client import ACE_FEED_URL
from .status_service import StatusOptions


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    ifttt_key: str = ""  # IFTTT Maker webhook key, only needed to send
    ifttt_event: str = ""
    destination_stop: str = ""  # Stop name whose ETA is added to every status line
    stop_filter: str = ""  # Report only ETAs to this stop
    use_seed: bool = False  # Serve bundled seed data instead of calling ACE
    feed_url: str = ACE_FEED_URL
    feed_cache_ttl: float = DEFAULT_TTL_SECONDS
    http_timeout: float = 10.0
    log_level: str = "INFO"

    def status_options(self) -> StatusOptions:
        return StatusOptions(
            destination_name=_blank_to_none(self.destination_stop),
            stop_name_filter=_blank_to_none(self.stop_filter),
        )


def _blank_to_none(value: str) -> Optional[str]:
    value = (value or "").strip()
    return value or None


def get_settings() -> Settings:
    return Settings()
