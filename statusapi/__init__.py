"""Live status API for game servers."""

__version__ = "0.1.0"
