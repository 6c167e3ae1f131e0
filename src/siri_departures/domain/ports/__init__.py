"""Ports (interfaces) for the ports-and-adapters architecture."""

from siri_departures.domain.ports.departure_repository import DepartureRepository
from siri_departures.domain.ports.stop_resolver import StopResolver
from siri_departures.domain.ports.stop_selector import StopSelector
from siri_departures.domain.ports.topology_repository import TopologyRepository

__all__ = [
    "DepartureRepository",
    "StopResolver",
    "StopSelector",
    "TopologyRepository",
]
