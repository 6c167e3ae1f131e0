"""Shared fixtures."""

import pytest

from siri_departures.domain.models import StopRecord

NETEX_NS = "http://www.netex.org.uk/netex"


def netex_document(members: str, frame: str = "GeneralFrame") -> str:
    """Wrap member elements in a NeTEx PublicationDelivery envelope."""
    return f"""<?xml version="1.0" encoding="UTF-8"?>
<PublicationDelivery xmlns="{NETEX_NS}" version="1.09:FR-NETEX-2.1-1.0">
  <PublicationTimestamp>2024-01-01T00:00:00Z</PublicationTimestamp>
  <dataObjects>
    <{frame} id="FR:GeneralFrame:NETEX_ARRET:" version="any">
      <members>
{members}
      </members>
    </{frame}>
  </dataObjects>
</PublicationDelivery>
"""


@pytest.fixture
def central_document() -> str:
    """Station S1 (connections: ferry) with quays Q1 (tram) and Q2 (bus)."""
    return netex_document(
        """
        <StopPlace id="S1" version="any">
          <Name>Central</Name>
          <OtherTransportModes>ferry</OtherTransportModes>
        </StopPlace>
        <Quay id="Q1" version="any">
          <Name>Central - A</Name>
          <SiteRef ref="S1"/>
          <TransportMode>tram</TransportMode>
        </Quay>
        <Quay id="Q2" version="any">
          <Name>Central - B</Name>
          <SiteRef ref="S1"/>
          <TransportMode>bus</TransportMode>
        </Quay>
        """
    )


@pytest.fixture
def sample_stops() -> list[StopRecord]:
    """Stops from two stations plus one orphan quay."""
    return [
        StopRecord(
            id="FR:Quay:101",
            name="Gare Saint-Jean - Quai A",
            transport_mode="tram",
            other_transport_modes=["bus"],
            parent_station_id="FR:StopPlace:1",
        ),
        StopRecord(
            id="FR:Quay:201",
            name="Hôtel de Ville - Quai 1",
            transport_mode="bus",
            parent_station_id="FR:StopPlace:2",
        ),
        StopRecord(
            id="FR:Quay:102",
            name="Gare Saint-Jean - Quai B",
            transport_mode="tram",
            other_transport_modes=["bus"],
            parent_station_id="FR:StopPlace:1",
        ),
        StopRecord(id="FR:Quay:999", name="Dépôt", transport_mode="bus"),
    ]


@pytest.fixture
def make_netex_document():
    """Factory wrapping member elements in a NeTEx envelope."""
    return netex_document
