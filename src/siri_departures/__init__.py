"""Resolve NeTEx stops by name and show SIRI real-time departures."""

__version__ = "1.0.0"
