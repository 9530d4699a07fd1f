"""StayMate property listings: catalog search, favorites and detail views."""

__version__ = "0.1.0"
