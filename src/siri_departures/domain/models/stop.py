"""Stop (quay) domain model."""

from dataclasses import dataclass, field

from siri_departures.domain.text_normalizer import normalize_text


@dataclass(frozen=True)
class StopRecord:
    """A platform-level stop (quay) loaded from the topology document.

    transport_mode is usually "bus", "tram" or "ferry"; other values are kept
    as-is. The normalized fields are derived from name and id on construction.
    """

    id: str
    name: str
    transport_mode: str
    other_transport_modes: list[str] = field(default_factory=list)
    parent_station_id: str | None = None
    normalized_name: str = field(init=False, repr=False, compare=False)
    normalized_id: str = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "normalized_name", normalize_text(self.name))
        object.__setattr__(self, "normalized_id", normalize_text(self.id))
