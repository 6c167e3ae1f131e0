"""Application services for stop resolution."""

from siri_departures.application.services.stop_index import StopIndex
from siri_departures.application.services.stop_resolution import (
    ResolutionState,
    SingleStopResolver,
    StationQuayResolver,
    create_resolver,
)

__all__ = [
    "ResolutionState",
    "SingleStopResolver",
    "StationQuayResolver",
    "StopIndex",
    "create_resolver",
]
