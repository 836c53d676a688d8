"""Test doubles for the directions provider and the publisher."""

from __future__ import annotations

from datetime import timedelta
from typing import List, Optional, Sequence, Tuple

from location_eta.domain.models import (
    DirectionsRoute,
    GeoPoint,
    RouteLeg,
    TransportMode,
)


class FakeDirections:
    """Directions provider returning a scripted answer and recording calls.

    ``seconds=None`` answers with no routes.
    """

    def __init__(
        self,
        seconds: Optional[float] = 600,
        error: Optional[Exception] = None,
    ) -> None:
        self.seconds = seconds
        self.error = error
        self.calls: List[Tuple[GeoPoint, GeoPoint, TransportMode]] = []

    def route(
        self, origin: GeoPoint, destination: GeoPoint, mode: TransportMode
    ) -> Sequence[DirectionsRoute]:
        self.calls.append((origin, destination, mode))
        if self.error is not None:
            raise self.error
        if self.seconds is None:
            return []
        return [
            DirectionsRoute(legs=(RouteLeg(duration=timedelta(seconds=self.seconds)),))
        ]


class RecordingPublisher:
    def __init__(self, error: Optional[Exception] = None) -> None:
        self.error = error
        self.published: List[Tuple[str, timedelta]] = []

    def publish(self, order_id: str, travel_time: timedelta) -> None:
        if self.error is not None:
            raise self.error
        self.published.append((order_id, travel_time))
