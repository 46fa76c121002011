"""Joins raw vehicle records with a stop directory into Train views."""

import logging
from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Optional

from .exceptions import ACEStatusError, StopNotFoundError
from .models import (
    UNKNOWN,
    GeoPoint,
    NextStopETA,
    Train,
    optional_id,
    optional_text,
    safe_int,
)
from .stop_directory import StopDirectory

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EnrichOptions:
    """How vehicles are selected and which destination they are measured against."""
    in_service_only: bool = False
    destination_name: Optional[str] = None


class VehicleEnricher:
    """Builds Train views from raw ``get_vehicles`` records."""

    def enrich(
        self,
        vehicles: Iterable[Any],
        directory: StopDirectory,
        options: Optional[EnrichOptions] = None,
    ) -> List[Train]:
        """
        Enrich raw vehicle records.

        Stops the directory does not know are kept with the name "unknown".
        A destination that cannot be resolved leaves the trains without one.

        Args:
            vehicles: Raw vehicle records, never modified.
            directory: Stops of the same fetch cycle.
            options: Selection and destination settings.

        Returns:
            List of Train objects in feed order.
        """
        options = options or EnrichOptions()
        destination = self._resolve_destination(directory, options.destination_name)

        trains: List[Train] = []
        for record in vehicles:
            if not isinstance(record, Mapping):
                logger.warning(f"Skipping vehicle record of type {type(record).__name__}")
                continue
            if options.in_service_only and not record.get("inService"):
                continue
            trains.append(self._build_train(record, directory, destination))

        logger.debug(f"Enriched {len(trains)} trains against {len(directory)} stops")
        return trains

    @staticmethod
    def _resolve_destination(directory: StopDirectory, name: Optional[str]):
        if name is None or not name.strip():
            return None
        try:
            return directory.lookup_by_name(name)
        except ACEStatusError as e:
            logger.warning(f"Destination '{name}' not resolved: {e}")
            return None

    def _build_train(self, record: Mapping[str, Any], directory: StopDirectory, destination) -> Train:
        equipment_id = optional_id(record.get("equipmentID")) or UNKNOWN
        raw_etas = record.get("minutesToNextStops")
        if not isinstance(raw_etas, list):
            if raw_etas is not None:
                logger.warning(f"Vehicle {equipment_id} has malformed minutesToNextStops")
            raw_etas = []

        etas = tuple(
            self._build_eta(entry, directory)
            for entry in raw_etas
            if isinstance(entry, Mapping)
        )

        return Train(
            equipment_id=equipment_id,
            geo=GeoPoint.from_record(record),
            delay_minutes=safe_int(record.get("onSchedule"), 0),
            schedule_number=optional_text(record.get("scheduleNumber")) or UNKNOWN,
            in_service=bool(record.get("inService")),
            next_stop_id=optional_id(record.get("nextStopID")),
            etas=etas,
            destination_name=destination.name if destination else None,
            destination_stop_id=destination.stop_id if destination else None,
        )

    @staticmethod
    def _build_eta(entry: Mapping[str, Any], directory: StopDirectory) -> NextStopETA:
        stop_id = optional_id(entry.get("stopID"))
        try:
            display_name = directory.lookup_by_id(stop_id).name
            resolved = True
        except StopNotFoundError:
            display_name = UNKNOWN
            resolved = False

        return NextStopETA(
            stop_id=stop_id,
            display_name=display_name,
            scheduled_time=optional_text(entry.get("schedule")),
            status_text=optional_text(entry.get("status")),
            minutes_away=safe_int(entry.get("minutes")),
            resolved=resolved,
        )
