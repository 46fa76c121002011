"""Id- and name-indexed lookup over a stop snapshot."""

import logging
from typing import Any, Dict, Iterable, Iterator, Mapping, Optional

from .exceptions import InvalidArgumentError, StopNotFoundError
from .models import Stop

logger = logging.getLogger(__name__)


class StopDirectory:
    """Indexes one snapshot of stops by id and by case-insensitive name."""

    def __init__(self, stops: Iterable[Stop]):
        self._by_id: Dict[str, Stop] = {}
        self._by_name: Dict[str, Stop] = {}  # lowercased name -> stop

        for stop in stops:
            if stop.stop_id in self._by_id:
                logger.debug(f"Ignoring duplicate stop id {stop.stop_id}")
                continue
            self._by_id[stop.stop_id] = stop
            # Names are not unique; the first stop in snapshot order wins
            self._by_name.setdefault(stop.name.strip().lower(), stop)

    @classmethod
    def from_records(cls, records: Iterable[Mapping[str, Any]]) -> "StopDirectory":
        """Build a directory from raw ``get_stops`` records, skipping malformed ones."""
        stops = []
        for record in records:
            try:
                stops.append(Stop.from_record(record))
            except (AttributeError, ValueError) as e:
                logger.warning(f"Skipping malformed stop record: {e}")
        return cls(stops)

    def __len__(self) -> int:
        return len(self._by_id)

    def __iter__(self) -> Iterator[Stop]:
        return iter(self._by_id.values())

    def lookup_by_id(self, stop_id: Any) -> Stop:
        """
        Get a stop by id.

        Raises:
            StopNotFoundError: If no stop has this id.
        """
        key = None if stop_id is None else str(stop_id)
        if key not in self._by_id:
            raise StopNotFoundError(f"Stop {stop_id} not found")
        return self._by_id[key]

    def lookup_by_name(self, name: Optional[str]) -> Stop:
        """
        Get a stop by name, ignoring case and surrounding whitespace.

        Raises:
            InvalidArgumentError: If name is empty or missing.
            StopNotFoundError: If no stop has this name.
        """
        if name is None or not name.strip():
            raise InvalidArgumentError("Stop name must not be empty")
        stop = self._by_name.get(name.strip().lower())
        if stop is None:
            raise StopNotFoundError(f"No stop named '{name}'")
        return stop
