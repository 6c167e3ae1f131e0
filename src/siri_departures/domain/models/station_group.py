"""Station group domain model."""

from dataclasses import dataclass, field

from siri_departures.domain.models.stop import StopRecord
from siri_departures.domain.text_normalizer import normalize_text

STATION_NAME_DELIMITER = " - "


def station_name_from_quay_name(quay_name: str) -> str:
    """Derive a station name from a quay name ("Central - A" -> "Central")."""
    return quay_name.split(STATION_NAME_DELIMITER, 1)[0]


@dataclass(frozen=True)
class StationGroup:
    """Quays sharing the same parent station, in document order."""

    station_id: str
    name: str
    quays: tuple[StopRecord, ...] = ()
    normalized_name: str = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "quays", tuple(self.quays))
        object.__setattr__(self, "normalized_name", normalize_text(self.name))
