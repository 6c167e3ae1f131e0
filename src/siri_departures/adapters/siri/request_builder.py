"""Builder for SIRI StopMonitoring request documents."""

import xml.etree.ElementTree as ET

SIRI_NAMESPACE = "http://www.siri.org.uk/siri"
SIRI_VERSION = "2.0"


def build_stop_monitoring_request(stop_id: str, limit: int, requestor_ref: str) -> bytes:
    """Build a SIRI 2.0 StopMonitoring request for one stop.

    Args:
        stop_id: Stop identifier sent as MonitoringRef.
        limit: Maximum number of visits requested (MaximumStopVisits).
        requestor_ref: Identifier of the requesting system.

    Returns:
        UTF-8 encoded XML document with declaration.
    """
    siri = ET.Element("Siri", {"xmlns": SIRI_NAMESPACE, "version": SIRI_VERSION})
    service_request = ET.SubElement(siri, "ServiceRequest")
    ET.SubElement(service_request, "RequestorRef").text = requestor_ref

    stop_monitoring = ET.SubElement(
        service_request, "StopMonitoringRequest", {"version": SIRI_VERSION}
    )
    ET.SubElement(stop_monitoring, "MonitoringRef").text = stop_id
    ET.SubElement(stop_monitoring, "MaximumStopVisits").text = str(limit)

    return ET.tostring(siri, encoding="utf-8", xml_declaration=True)
