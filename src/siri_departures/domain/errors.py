"""Domain errors."""


class TopologyLoadError(RuntimeError):
    """Raised when the transit-topology document cannot be read or parsed."""


class DepartureQueryError(RuntimeError):
    """Raised when the real-time departure service cannot be queried."""
