"""Battery installation registry with postcode range statistics."""

__version__ = "0.1.0"
