"""Loader for NeTEx stop topology documents.

Expected layout (namespaces are ignored)::

    PublicationDelivery
      dataObjects
        GeneralFrame (or any other *Frame, possibly nested in a CompositeFrame)
          members
            StopPlace id="..."   TransportMode, OtherTransportModes ("bus ferry")
            Quay id="..."        Name, TransportMode, SiteRef ref="<StopPlace id>"

Quays nested in a member StopPlace (``StopPlace/quays/Quay``) are loaded too,
with that StopPlace as their parent.
"""

import logging
import xml.etree.ElementTree as ET
from pathlib import Path

from siri_departures.adapters.xml_namespaces import strip_namespaces
from siri_departures.domain.errors import TopologyLoadError
from siri_departures.domain.models import StopRecord

logger = logging.getLogger(__name__)

STOP_MEMBER_TAGS = ("Quay", "StopPlace")


def _children(parent: ET.Element | None, tag: str) -> list[ET.Element]:
    """Return all direct children named tag, always as a list.

    This is the single place where repeated elements are collected; a lone
    element and many elements come back the same way.
    """
    if parent is None:
        return []
    return parent.findall(tag)


def _text(element: ET.Element, tag: str) -> str:
    """Return the stripped text of a child element, or "" if absent."""
    return (element.findtext(tag) or "").strip()


def _find_members(root: ET.Element) -> ET.Element | None:
    """Locate the members container holding the stops.

    The first frame whose members include a Quay or StopPlace wins. Without
    one, the first members container found is returned.
    """
    if root.tag != "PublicationDelivery":
        logger.warning(f"Unexpected root element '{root.tag}', expected 'PublicationDelivery'")
        return None

    data_objects = root.find("dataObjects")
    if data_objects is None:
        return None

    first_members = None
    for frame in data_objects.iter():
        if not frame.tag.endswith("Frame"):
            continue
        members = frame.find("members")
        if members is None:
            continue
        if any(member.tag in STOP_MEMBER_TAGS for member in members):
            return members
        if first_members is None:
            first_members = members
    return first_members


def _split_modes(modes: str) -> list[str]:
    """Split a space-delimited transport mode list ("bus ferry" -> ["bus", "ferry"])."""
    return modes.split()


class _StopBuilder:
    """Builds StopRecords, resolving SiteRefs against the known stop places."""

    def __init__(self, stop_places: list[ET.Element]) -> None:
        # First occurrence wins, as with a linear scan
        self._stop_places: dict[str, ET.Element] = {}
        for stop_place in stop_places:
            self._stop_places.setdefault(stop_place.get("id", ""), stop_place)

    def _resolve_site_ref(self, quay: ET.Element) -> ET.Element | None:
        site_ref = quay.find("SiteRef")
        if site_ref is None:
            return None
        ref = site_ref.get("ref")
        if not ref:
            return None
        return self._stop_places.get(ref)

    def build(self, quay: ET.Element, enclosing: ET.Element | None = None) -> StopRecord:
        """Build a StopRecord from a Quay element.

        enclosing is the StopPlace a nested Quay was found in; it is used as
        parent when the Quay's own SiteRef does not resolve.
        """
        stop_place = self._resolve_site_ref(quay)
        if stop_place is None:
            stop_place = enclosing

        transport_mode = _text(quay, "TransportMode")
        if not transport_mode and stop_place is not None:
            transport_mode = _text(stop_place, "TransportMode")

        # Connections are only reported for a quay with a known parent station
        parent_station_id = stop_place.get("id") if stop_place is not None else None
        other_transport_modes = (
            _split_modes(_text(stop_place, "OtherTransportModes"))
            if stop_place is not None and parent_station_id
            else []
        )

        return StopRecord(
            id=quay.get("id", ""),
            name=_text(quay, "Name"),
            transport_mode=transport_mode,
            other_transport_modes=other_transport_modes,
            parent_station_id=parent_station_id or None,
        )


def parse_topology(content: str) -> list[StopRecord]:
    """Parse a NeTEx document into stop records in document order.

    Raises:
        TopologyLoadError: If the document is not well-formed XML.
    """
    try:
        root = ET.fromstring(content)
    except ET.ParseError as e:
        raise TopologyLoadError(f"Invalid topology document: {e}") from e

    strip_namespaces(root)
    members = _find_members(root)
    if members is None or len(members) == 0:
        logger.warning("Topology document has no members, no stops loaded")
        return []

    stop_places = _children(members, "StopPlace")
    builder = _StopBuilder(stop_places)
    stops: list[StopRecord] = []
    quay_count = 0

    for member in members:
        if member.tag == "Quay":
            quay_count += 1
            stops.append(builder.build(member))
        elif member.tag == "StopPlace":
            nested_quays = _children(member.find("quays"), "Quay")
            quay_count += len(nested_quays)
            stops.extend(builder.build(quay, enclosing=member) for quay in nested_quays)

    logger.info(f"Found {quay_count} quay(s) and {len(stop_places)} stop place(s)")
    return stops


class NetexTopologyLoader:
    """Loads stop records from a NeTEx file on disk."""

    def __init__(self, path: Path) -> None:
        """Initialize with the path of the topology document."""
        self._path = path

    def load(self) -> list[StopRecord]:
        """Read and parse the topology document.

        Raises:
            TopologyLoadError: If the file cannot be read or parsed.
        """
        logger.info(f"Loading stops from {self._path}...")
        try:
            content = self._path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise TopologyLoadError(f"Cannot read topology document {self._path}: {e}") from e

        stops = parse_topology(content)
        logger.info(f"Loaded {len(stops)} stop(s)")
        return stops
