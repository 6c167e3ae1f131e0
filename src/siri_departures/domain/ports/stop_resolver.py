"""Stop resolver port."""

from typing import Protocol

# "stop": one incremental search over all quays
# "station": search a station, then check some of its quays
RESOLUTION_MODES = ("stop", "station")


class StopResolver(Protocol):
    """Port for a strategy that turns user input into stop identifiers."""

    def resolve(self) -> list[str]:
        """Resolve stop identifiers. An empty list means no stop was chosen."""
        ...
