"""Domain layer for SIRI departures."""
