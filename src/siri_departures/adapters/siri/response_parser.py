"""Parser for SIRI StopMonitoring responses."""

import logging
import xml.etree.ElementTree as ET
from datetime import datetime

from siri_departures.adapters.xml_namespaces import strip_namespaces
from siri_departures.domain.errors import DepartureQueryError
from siri_departures.domain.models import Departure

logger = logging.getLogger(__name__)


class SiriResponseParser:
    """Parses SIRI StopMonitoring delivery documents into Departure objects."""

    @staticmethod
    def parse(xml_text: str, stop_id: str, limit: int) -> list[Departure]:
        """Parse monitored stop visits from a SIRI response.

        Args:
            xml_text: Raw response body.
            stop_id: Identifier the request was made for.
            limit: Maximum number of departures to return.

        Returns:
            Departures in response order.

        Raises:
            DepartureQueryError: If the body is not a SIRI service delivery.
        """
        try:
            root = ET.fromstring(xml_text)
        except ET.ParseError as e:
            raise DepartureQueryError(f"Invalid SIRI response: {e}") from e

        strip_namespaces(root)
        service_delivery = root.find("ServiceDelivery") if root.tag == "Siri" else None
        if service_delivery is None:
            raise DepartureQueryError("Invalid SIRI response: missing Siri/ServiceDelivery")

        departures = []
        for visit in service_delivery.iterfind("StopMonitoringDelivery/MonitoredStopVisit"):
            departure = SiriResponseParser._parse_visit(visit, stop_id)
            if departure:
                departures.append(departure)

        return departures[:limit]

    @staticmethod
    def _parse_visit(visit: ET.Element, stop_id: str) -> Departure | None:
        """Parse a single MonitoredStopVisit into a Departure."""
        journey = visit.find("MonitoredVehicleJourney")
        if journey is None:
            logger.warning("Skipping stop visit without MonitoredVehicleJourney")
            return None

        call = journey.find("MonitoredCall")
        aimed = SiriResponseParser._parse_time(call, "AimedDepartureTime")
        expected = SiriResponseParser._parse_time(call, "ExpectedDepartureTime")
        if aimed is None and expected is None:
            logger.warning("Skipping stop visit without departure time")
            return None

        stop_point_ref = call.findtext("StopPointRef") if call is not None else None

        return Departure(
            stop_id=visit.findtext("MonitoringRef") or stop_id,
            line_ref=(journey.findtext("LineRef") or "").strip(),
            destination=(journey.findtext("DestinationName") or "").strip(),
            aimed_departure_time=aimed,
            expected_departure_time=expected,
            stop_point_ref=stop_point_ref.strip() if stop_point_ref else None,
        )

    @staticmethod
    def _parse_time(call: ET.Element | None, tag: str) -> datetime | None:
        """Parse an ISO 8601 time from a MonitoredCall child."""
        if call is None:
            return None

        time_str = (call.findtext(tag) or "").strip()
        if not time_str:
            return None

        try:
            return datetime.fromisoformat(time_str.replace("Z", "+00:00"))
        except ValueError:
            logger.warning(f"Unparseable {tag}: {time_str}")
            return None
