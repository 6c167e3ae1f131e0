"""Departure domain model."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Departure:
    """Represents a single upcoming passage at a monitored stop."""

    stop_id: str
    line_ref: str
    destination: str
    aimed_departure_time: datetime | None
    expected_departure_time: datetime | None
    stop_point_ref: str | None = None  # Serving platform (e.g., "QUAY:1234")

    @property
    def departure_time(self) -> datetime | None:
        """Best known departure time: expected if available, otherwise aimed."""
        return self.expected_departure_time or self.aimed_departure_time
