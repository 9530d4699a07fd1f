"""Listing services: catalog loading, filtering, favorites and session state."""
