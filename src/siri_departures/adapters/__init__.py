"""Adapters layer - external system integrations."""

from siri_departures.adapters.config import AppConfig
from siri_departures.adapters.console import RichStopSelector
from siri_departures.adapters.netex import NetexTopologyLoader
from siri_departures.adapters.siri import SiriDepartureRepository

__all__ = [
    "AppConfig",
    "NetexTopologyLoader",
    "RichStopSelector",
    "SiriDepartureRepository",
]
