"""SIRI StopMonitoring adapters."""

from siri_departures.adapters.siri.request_builder import build_stop_monitoring_request
from siri_departures.adapters.siri.response_parser import SiriResponseParser
from siri_departures.adapters.siri.siri_departure_repository import SiriDepartureRepository

__all__ = [
    "SiriDepartureRepository",
    "SiriResponseParser",
    "build_stop_monitoring_request",
]
