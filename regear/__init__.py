"""Guild roster and regear planning."""

__version__ = "0.1.0"
