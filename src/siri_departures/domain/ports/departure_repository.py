"""Departure repository port."""

from collections.abc import Sequence
from typing import Protocol

from siri_departures.domain.models.departure import Departure


class DepartureRepository(Protocol):
    """Port for retrieving real-time departure information."""

    async def get_departures(
        self, stop_ids: Sequence[str], limit: int = 5
    ) -> dict[str, list[Departure]]:
        """Get upcoming departures for each stop, keyed by stop identifier."""
        ...
