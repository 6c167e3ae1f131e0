"""Console rendering of departures using rich tables."""

from datetime import datetime

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from siri_departures.domain.models import Departure

TIME_FORMAT = "%H:%M:%S"


def format_time(value: datetime | None) -> str:
    """Format a departure time in local time, or "-" if unknown."""
    if value is None:
        return "-"
    if value.tzinfo is not None:
        value = value.astimezone()
    return value.strftime(TIME_FORMAT)


def _delay_style(departure: Departure) -> str:
    """Highlight expected times later than planned."""
    aimed, expected = departure.aimed_departure_time, departure.expected_departure_time
    if aimed is None or expected is None:
        return ""
    try:
        return "red" if expected > aimed else "green"
    except TypeError:  # naive vs aware
        return ""


def build_departure_table(stop_id: str, departures: list[Departure]) -> Table:
    """Build the table of upcoming departures for one stop."""
    table = Table(title=f"Next departures at {escape(stop_id)}", title_justify="left")
    table.add_column("Line", style="bold")
    table.add_column("Destination")
    table.add_column("Expected", justify="right")
    table.add_column("Aimed", justify="right", style="dim")
    table.add_column("Platform", style="dim")

    for departure in departures:
        style = _delay_style(departure)
        expected = format_time(departure.expected_departure_time)
        table.add_row(
            escape(departure.line_ref),
            escape(departure.destination),
            f"[{style}]{expected}[/{style}]" if style else expected,
            format_time(departure.aimed_departure_time),
            escape(departure.stop_point_ref or ""),
        )
    return table


def print_departures(results: dict[str, list[Departure]], console: Console | None = None) -> None:
    """Print departures for each queried stop."""
    console = console or Console()
    for stop_id, departures in results.items():
        if not departures:
            console.print(f"No upcoming departures for stop {escape(stop_id)}.")
            continue
        console.print(build_departure_table(stop_id, departures))
