"""Directions adapters - Implementations of DirectionsPort.

Available implementations:
- GoogleDirectionsAdapter: Google Maps Directions web service
"""

from .google_directions import GoogleDirectionsAdapter

__all__ = ["GoogleDirectionsAdapter"]
