"""NeTEx topology adapters."""

from siri_departures.adapters.netex.topology_loader import NetexTopologyLoader, parse_topology

__all__ = ["NetexTopologyLoader", "parse_topology"]
