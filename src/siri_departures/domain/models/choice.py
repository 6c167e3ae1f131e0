"""Selection choice model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Choice:
    """A labelled candidate offered to the user by a selection prompt."""

    label: str
    value: str
    description: str | None = None
