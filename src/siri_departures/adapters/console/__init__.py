"""Console adapters (interactive prompts and output)."""

from siri_departures.adapters.console.departure_printer import print_departures
from siri_departures.adapters.console.rich_selector import RichStopSelector

__all__ = ["RichStopSelector", "print_departures"]
