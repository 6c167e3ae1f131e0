"""Interactive stop resolution strategies."""

import logging
from enum import Enum
from typing import TYPE_CHECKING

from siri_departures.domain.models import Choice, StationGroup, StopRecord
from siri_departures.domain.ports.stop_resolver import RESOLUTION_MODES

if TYPE_CHECKING:
    from siri_departures.application.services.stop_index import StopIndex
    from siri_departures.domain.ports import StopResolver, StopSelector

logger = logging.getLogger(__name__)


def _connections_suffix(stop: StopRecord) -> str:
    """Format the transport modes reachable through the parent station."""
    if not stop.other_transport_modes:
        return ""
    return f" connections: {', '.join(stop.other_transport_modes)}"


def stop_choice(stop: StopRecord) -> Choice:
    """Build a search candidate for a single stop."""
    refs = " ".join(ref for ref in (stop.id, stop.parent_station_id) if ref)
    return Choice(
        label=f"{stop.name} [{stop.transport_mode}]{_connections_suffix(stop)} ({refs})",
        value=stop.id,
        description=stop.name,
    )


def station_choice(group: StationGroup) -> Choice:
    """Build a search candidate for a station group."""
    count = len(group.quays)
    return Choice(
        label=f"{group.name} ({count} {'quay' if count == 1 else 'quays'})",
        value=group.station_id,
        description=group.name,
    )


def quay_choice(stop: StopRecord) -> Choice:
    """Build a checkbox entry for a quay of a chosen station."""
    return Choice(
        label=f"{stop.name} ({stop.id}) [{stop.transport_mode}]{_connections_suffix(stop)}",
        value=stop.id,
    )


class SingleStopResolver:
    """Resolve exactly one stop through a single incremental search."""

    def __init__(self, index: "StopIndex", selector: "StopSelector") -> None:
        """Initialize with a stop index and a selection capability."""
        self._index = index
        self._selector = selector

    def search_stops(self, query: str) -> list[Choice]:
        """Candidate source for the search prompt."""
        return [stop_choice(stop) for stop in self._index.filter_stops(query)]

    def resolve(self) -> list[str]:
        """Prompt for a stop; returns [stop_id] or [] when cancelled."""
        stop_id = self._selector.search("Search for a stop:", self.search_stops)
        if not stop_id:
            logger.debug("Stop search cancelled")
            return []
        logger.debug(f"Selected stop {stop_id}")
        return [stop_id]


class ResolutionState(Enum):
    """States of the station-then-quay resolution flow."""

    AWAITING_STATION_QUERY = "awaiting_station_query"
    STATION_CHOSEN = "station_chosen"
    AWAITING_QUAY_SELECTION = "awaiting_quay_selection"
    RESOLVED = "resolved"
    CANCELLED = "cancelled"


class StationQuayResolver:
    """Resolve stops by searching a station first, then checking its quays."""

    def __init__(self, index: "StopIndex", selector: "StopSelector") -> None:
        """Initialize with a stop index and a selection capability."""
        self._index = index
        self._selector = selector
        self._stations = index.group_by_station()
        self.state = ResolutionState.AWAITING_STATION_QUERY
        self.station: StationGroup | None = None

    def search_stations(self, query: str) -> list[Choice]:
        """Candidate source for the station search prompt."""
        return [station_choice(group) for group in self._index.filter_stations(query)]

    def _transition(self, state: ResolutionState) -> None:
        logger.debug(f"Resolution state: {self.state.value} -> {state.value}")
        self.state = state

    def resolve(self) -> list[str]:
        """Prompt for a station, then for its quays.

        Returns the checked quay ids; an empty list means nothing was chosen.
        """
        self._transition(ResolutionState.AWAITING_STATION_QUERY)
        station_id = self._selector.search("Search for a station:", self.search_stations)
        self.station = self._stations.get(station_id) if station_id else None
        if self.station is None:
            self._transition(ResolutionState.CANCELLED)
            return []

        self._transition(ResolutionState.STATION_CHOSEN)
        choices = [quay_choice(stop) for stop in self.station.quays]

        self._transition(ResolutionState.AWAITING_QUAY_SELECTION)
        stop_ids = self._selector.checkbox(f"Select quays of {self.station.name}:", choices)
        if not stop_ids:
            self._transition(ResolutionState.CANCELLED)
            return []

        self._transition(ResolutionState.RESOLVED)
        return list(stop_ids)


def create_resolver(mode: str, index: "StopIndex", selector: "StopSelector") -> "StopResolver":
    """Create the resolution strategy for a mode ("stop" or "station")."""
    if mode == "stop":
        return SingleStopResolver(index, selector)
    if mode == "station":
        return StationQuayResolver(index, selector)
    raise ValueError(f"Unknown resolution mode '{mode}', expected one of {RESOLUTION_MODES}")
