"""Domain models for SIRI departures."""

from siri_departures.domain.models.choice import Choice
from siri_departures.domain.models.departure import Departure
from siri_departures.domain.models.station_group import StationGroup
from siri_departures.domain.models.stop import StopRecord

__all__ = [
    "Choice",
    "Departure",
    "StationGroup",
    "StopRecord",
]
