"""Topology repository port."""

from typing import Protocol

from siri_departures.domain.models.stop import StopRecord


class TopologyRepository(Protocol):
    """Port for loading stop records from a transit-topology source."""

    def load(self) -> list[StopRecord]:
        """Load all stop records in source order."""
        ...
