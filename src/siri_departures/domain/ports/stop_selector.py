"""Stop selector port (interactive search and multi-select)."""

from collections.abc import Callable
from typing import Protocol

from siri_departures.domain.models.choice import Choice


class StopSelector(Protocol):
    """Port for the interactive prompts used to pick stops."""

    def search(self, message: str, source: Callable[[str], list[Choice]]) -> str | None:
        """Incrementally search candidates produced by source.

        Returns the value of the chosen candidate, or None if the user cancelled.
        """
        ...

    def checkbox(self, message: str, choices: list[Choice]) -> list[str]:
        """Let the user check zero or more choices; returns the checked values."""
        ...
