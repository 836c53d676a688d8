"""Directions port - Abstraction for the routing provider.

This protocol defines the contract for directions services, allowing
different implementations (Google Maps, OSRM, fakes in tests) to be used.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import DirectionsRoute, GeoPoint, TransportMode


class DirectionsPort(Protocol):
    """Port for directions lookups.

    Implementation: adapters/directions/google_directions.py
    """

    def route(
        self,
        origin: GeoPoint,
        destination: GeoPoint,
        mode: TransportMode,
    ) -> Sequence[DirectionsRoute]:
        """Request routes between two points.

        Args:
            origin: Start of the trip.
            destination: End of the trip.
            mode: Transport mode to route for.

        Returns:
            Routes in provider preference order; empty if none exist.

        Raises:
            ProviderError: If the provider call itself failed.
        """
        ...
