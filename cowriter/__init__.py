"""CoWriter - writing assistant backend and session layer."""

__version__ = "0.1.0"
