"""Searchable in-memory index of stops."""

import logging
from collections.abc import Iterable

from siri_departures.domain.models import StationGroup, StopRecord
from siri_departures.domain.models.station_group import station_name_from_quay_name
from siri_departures.domain.text_normalizer import normalize_text

logger = logging.getLogger(__name__)


class StopIndex:
    """Read-only index over loaded stop records.

    The stop snapshot and the station grouping are built once on construction
    and never mutated afterwards.
    """

    def __init__(self, stops: Iterable[StopRecord]) -> None:
        """Initialize with stop records in document order."""
        self._stops: tuple[StopRecord, ...] = tuple(stops)
        self._stations = self._group_by_station(self._stops)
        logger.debug(
            f"Indexed {len(self._stops)} stop(s) in {len(self._stations)} station(s)"
        )

    @property
    def stops(self) -> tuple[StopRecord, ...]:
        """All indexed stops in document order."""
        return self._stops

    def filter_stops(self, search_term: str) -> list[StopRecord]:
        """Return stops whose normalized name or id contains the normalized term.

        An empty term matches every stop. Input order is preserved.
        """
        needle = normalize_text(search_term)
        return [
            stop
            for stop in self._stops
            if needle in stop.normalized_name or needle in stop.normalized_id
        ]

    def group_by_station(self) -> dict[str, StationGroup]:
        """Return station groups keyed by parent station id, in encounter order."""
        return dict(self._stations)

    def filter_stations(self, search_term: str) -> list[StationGroup]:
        """Return station groups whose normalized name contains the normalized term."""
        needle = normalize_text(search_term)
        return [group for group in self._stations.values() if needle in group.normalized_name]

    @staticmethod
    def _group_by_station(stops: Iterable[StopRecord]) -> dict[str, StationGroup]:
        """Group stops by parent station, skipping stops without one."""
        quays_by_station: dict[str, list[StopRecord]] = {}
        for stop in stops:
            if stop.parent_station_id is None:
                continue
            quays_by_station.setdefault(stop.parent_station_id, []).append(stop)

        return {
            station_id: StationGroup(
                station_id=station_id,
                name=station_name_from_quay_name(quays[0].name),
                quays=tuple(quays),
            )
            for station_id, quays in quays_by_station.items()
        }
