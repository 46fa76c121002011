"""Data models for ACE train status."""

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Tuple

UNKNOWN = "unknown"


def safe_float(value: Any, fallback: float = 0.0) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return fallback


def safe_int(value: Any, fallback: Optional[int] = None) -> Optional[int]:
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return fallback


def optional_id(value: Any) -> Optional[str]:
    # The feed mixes numeric and string ids
    if value is None or value == "":
        return None
    return str(value)


def optional_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


@dataclass(frozen=True)
class GeoPoint:
    """A latitude/longitude pair."""
    lat: float
    lng: float

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "GeoPoint":
        return cls(lat=safe_float(record.get("lat")), lng=safe_float(record.get("lng")))


@dataclass(frozen=True)
class Stop:
    """Represents an ACE station stop."""
    stop_id: str
    route_id: Optional[str]
    name: str
    short_name: Optional[str]
    geo: GeoPoint

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Stop":
        """
        Build a Stop from a raw ``get_stops`` record.

        Raises:
            ValueError: If the record has no id or no name.
        """
        stop_id = optional_id(record.get("id"))
        name = optional_text(record.get("name"))
        if stop_id is None or name is None:
            raise ValueError(f"Stop record is missing id or name: {dict(record)!r}")
        return cls(
            stop_id=stop_id,
            route_id=optional_id(record.get("rid")),
            name=name,
            short_name=optional_text(record.get("shortName")),
            geo=GeoPoint.from_record(record),
        )


@dataclass(frozen=True)
class NextStopETA:
    """One upcoming stop for a vehicle, with its display name already resolved."""
    stop_id: Optional[str]
    display_name: str
    scheduled_time: Optional[str]  # e.g. "6:35 AM"
    status_text: Optional[str]  # e.g. "5 min" or "On Time"
    minutes_away: Optional[int]
    resolved: bool  # False when stop_id matched no stop in the directory


@dataclass(frozen=True)
class Train:
    """A vehicle joined with the stop snapshot it was fetched alongside."""
    equipment_id: str
    geo: GeoPoint
    delay_minutes: int  # Negative means late
    schedule_number: str
    in_service: bool
    next_stop_id: Optional[str]
    etas: Tuple[NextStopETA, ...] = ()
    destination_name: Optional[str] = None
    destination_stop_id: Optional[str] = None

    def eta_for_stop(self, stop_id: Optional[str]) -> Optional[NextStopETA]:
        """Return the ETA entry for a stop id, if the train has one."""
        if stop_id is None:
            return None
        for eta in self.etas:
            if eta.stop_id == stop_id:
                return eta
        return None

    def eta_for_stop_name(self, name: str) -> Optional[NextStopETA]:
        """Return the first ETA entry whose resolved display name equals ``name``."""
        for eta in self.etas:
            if eta.resolved and eta.display_name == name:
                return eta
        return None
