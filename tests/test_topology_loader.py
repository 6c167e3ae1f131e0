"""Tests for the NeTEx topology loader."""

from collections.abc import Callable
from pathlib import Path

import pytest

from siri_departures.adapters.netex import NetexTopologyLoader, parse_topology
from siri_departures.domain.errors import TopologyLoadError

DocumentFactory = Callable[..., str]


def test_loads_quays_in_document_order(central_document: str) -> None:
    """Given a station with two quays, when parsing, then both quays are loaded in order."""
    stops = parse_topology(central_document)

    assert [stop.id for stop in stops] == ["Q1", "Q2"]
    assert stops[0].name == "Central - A"
    assert stops[0].transport_mode == "tram"
    assert stops[1].transport_mode == "bus"


def test_resolves_parent_station_and_connections(central_document: str) -> None:
    """Given quays referencing a station, when parsing, then parent and connections are set."""
    stops = parse_topology(central_document)

    assert all(stop.parent_station_id == "S1" for stop in stops)
    assert all(stop.other_transport_modes == ["ferry"] for stop in stops)


def test_splits_other_transport_modes_in_order(make_netex_document: DocumentFactory) -> None:
    """Given a station with 'bus ferry', when parsing, then modes are ['bus', 'ferry']."""
    document = make_netex_document(
        """
        <StopPlace id="S1"><OtherTransportModes>bus ferry</OtherTransportModes></StopPlace>
        <Quay id="Q1"><Name>Pier</Name><SiteRef ref="S1"/><TransportMode>ferry</TransportMode></Quay>
        """
    )

    (stop,) = parse_topology(document)

    assert stop.other_transport_modes == ["bus", "ferry"]


def test_station_without_other_modes_gives_empty_list(
    make_netex_document: DocumentFactory,
) -> None:
    """Given a station without OtherTransportModes, when parsing, then modes are empty."""
    document = make_netex_document(
        """
        <StopPlace id="S1"/>
        <Quay id="Q1"><Name>Pier</Name><SiteRef ref="S1"/><TransportMode>ferry</TransportMode></Quay>
        """
    )

    (stop,) = parse_topology(document)

    assert stop.parent_station_id == "S1"
    assert stop.other_transport_modes == []


def test_unresolved_site_ref_degrades_gracefully(make_netex_document: DocumentFactory) -> None:
    """Given a quay referencing an unknown station, when parsing, then parent is absent."""
    document = make_netex_document(
        """
        <StopPlace id="S1"><OtherTransportModes>bus</OtherTransportModes></StopPlace>
        <Quay id="Q1"><Name>Lost</Name><SiteRef ref="S404"/><TransportMode>bus</TransportMode></Quay>
        """
    )

    (stop,) = parse_topology(document)

    assert stop.id == "Q1"
    assert stop.parent_station_id is None
    assert stop.other_transport_modes == []


def test_missing_site_ref_and_id_use_fallbacks(make_netex_document: DocumentFactory) -> None:
    """Given a quay without id and SiteRef, when parsing, then id is '' and parent absent."""
    document = make_netex_document("<Quay><Name>Nameless</Name></Quay>")

    (stop,) = parse_topology(document)

    assert stop.id == ""
    assert stop.name == "Nameless"
    assert stop.transport_mode == ""
    assert stop.parent_station_id is None


def test_single_quay_and_single_station_are_loaded(make_netex_document: DocumentFactory) -> None:
    """Given exactly one quay and one station, when parsing, then one stop is loaded."""
    document = make_netex_document(
        '<StopPlace id="S1"/><Quay id="Q1"><Name>Only</Name><SiteRef ref="S1"/></Quay>'
    )

    stops = parse_topology(document)

    assert len(stops) == 1
    assert stops[0].parent_station_id == "S1"


def test_first_duplicate_station_wins(make_netex_document: DocumentFactory) -> None:
    """Given two stations with the same id, when parsing, then the first one is used."""
    document = make_netex_document(
        """
        <StopPlace id="S1"><OtherTransportModes>tram</OtherTransportModes></StopPlace>
        <StopPlace id="S1"><OtherTransportModes>ferry</OtherTransportModes></StopPlace>
        <Quay id="Q1"><Name>Dup</Name><SiteRef ref="S1"/></Quay>
        """
    )

    (stop,) = parse_topology(document)

    assert stop.other_transport_modes == ["tram"]


def test_station_declared_after_quay_is_resolved(make_netex_document: DocumentFactory) -> None:
    """Given a station listed after its quay, when parsing, then the reference still resolves."""
    document = make_netex_document(
        """
        <Quay id="Q1"><Name>Early</Name><SiteRef ref="S1"/></Quay>
        <StopPlace id="S1"/>
        """
    )

    (stop,) = parse_topology(document)

    assert stop.parent_station_id == "S1"


def test_nested_quays_use_enclosing_station(make_netex_document: DocumentFactory) -> None:
    """Given quays nested in a StopPlace, when parsing, then the StopPlace is their parent."""
    document = make_netex_document(
        """
        <StopPlace id="S1">
          <TransportMode>tram</TransportMode>
          <OtherTransportModes>bus</OtherTransportModes>
          <quays>
            <Quay id="Q1"><Name>Square - 1</Name></Quay>
            <Quay id="Q2"><Name>Square - 2</Name><TransportMode>bus</TransportMode></Quay>
          </quays>
        </StopPlace>
        """
    )

    stops = parse_topology(document)

    assert [stop.id for stop in stops] == ["Q1", "Q2"]
    assert [stop.parent_station_id for stop in stops] == ["S1", "S1"]
    assert [stop.transport_mode for stop in stops] == ["tram", "bus"]
    assert stops[0].other_transport_modes == ["bus"]


def test_members_in_composite_frame_are_found(make_netex_document: DocumentFactory) -> None:
    """Given members inside a nested SiteFrame, when parsing, then quays are loaded."""
    document = make_netex_document(
        '<Quay id="Q1"><Name>Deep</Name></Quay>', frame="SiteFrame"
    ).replace("<SiteFrame", "<CompositeFrame><frames><SiteFrame").replace(
        "</SiteFrame>", "</SiteFrame></frames></CompositeFrame>"
    )

    stops = parse_topology(document)

    assert [stop.id for stop in stops] == ["Q1"]


def test_nested_quays_of_station_without_id_have_no_connections(
    make_netex_document: DocumentFactory,
) -> None:
    """Given quays nested in a StopPlace without id, when parsing, then they have no parent."""
    document = make_netex_document(
        """
        <StopPlace>
          <TransportMode>tram</TransportMode>
          <OtherTransportModes>bus ferry</OtherTransportModes>
          <quays><Quay id="Q1"><Name>Anonymous - 1</Name></Quay></quays>
        </StopPlace>
        """
    )

    (stop,) = parse_topology(document)

    assert stop.parent_station_id is None
    assert stop.other_transport_modes == []
    assert stop.transport_mode == "tram"


def test_frame_with_stops_is_preferred_over_earlier_frame() -> None:
    """Given an earlier frame without stops, when parsing, then the SiteFrame quays are loaded."""
    document = """<PublicationDelivery><dataObjects><CompositeFrame><frames>
        <ResourceFrame><members><Operator id="OP1"><Name>Transit Co</Name></Operator></members>
        </ResourceFrame>
        <SiteFrame><members>
          <StopPlace id="S1"><OtherTransportModes>bus</OtherTransportModes></StopPlace>
          <Quay id="Q1"><Name>Later - 1</Name><SiteRef ref="S1"/></Quay>
        </members></SiteFrame>
    </frames></CompositeFrame></dataObjects></PublicationDelivery>"""

    (stop,) = parse_topology(document)

    assert stop.id == "Q1"
    assert stop.parent_station_id == "S1"
    assert stop.other_transport_modes == ["bus"]


def test_frames_without_stops_yield_no_stops() -> None:
    """Given frames whose members hold no stops, when parsing, then no stops are returned."""
    document = """<PublicationDelivery><dataObjects><GeneralFrame><members>
        <Operator id="OP1"><Name>Transit Co</Name></Operator>
    </members></GeneralFrame></dataObjects></PublicationDelivery>"""

    assert parse_topology(document) == []


def test_document_without_namespace_is_parsed() -> None:
    """Given a document without XML namespace, when parsing, then quays are loaded."""
    document = """<PublicationDelivery><dataObjects><GeneralFrame><members>
        <Quay id="Q1"><Name>Plain</Name></Quay>
    </members></GeneralFrame></dataObjects></PublicationDelivery>"""

    assert [stop.name for stop in parse_topology(document)] == ["Plain"]


@pytest.mark.parametrize(
    "document",
    [
        "<PublicationDelivery/>",
        "<PublicationDelivery><dataObjects/></PublicationDelivery>",
        "<PublicationDelivery><dataObjects><GeneralFrame/></dataObjects></PublicationDelivery>",
        "<PublicationDelivery><dataObjects><GeneralFrame><members/></GeneralFrame>"
        "</dataObjects></PublicationDelivery>",
        "<SomethingElse><dataObjects/></SomethingElse>",
    ],
)
def test_missing_or_empty_members_yield_no_stops(document: str) -> None:
    """Given a document without members, when parsing, then no stops are returned."""
    assert parse_topology(document) == []


def test_malformed_document_raises() -> None:
    """Given malformed XML, when parsing, then TopologyLoadError is raised."""
    with pytest.raises(TopologyLoadError):
        parse_topology("<PublicationDelivery><dataObjects>")


def test_loader_reads_file(tmp_path: Path, central_document: str) -> None:
    """Given a NeTEx file on disk, when loading, then stops are returned."""
    path = tmp_path / "stops.xml"
    path.write_text(central_document, encoding="utf-8")

    stops = NetexTopologyLoader(path).load()

    assert [stop.id for stop in stops] == ["Q1", "Q2"]


def test_loader_missing_file_raises(tmp_path: Path) -> None:
    """Given a missing file, when loading, then TopologyLoadError is raised."""
    loader = NetexTopologyLoader(tmp_path / "missing.xml")

    with pytest.raises(TopologyLoadError, match="Cannot read topology document"):
        loader.load()
