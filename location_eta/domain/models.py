"""Immutable domain models for the Location ETA service.

All models are frozen dataclasses with slots. They have no external
dependencies and describe what an order looks like once its store
fields have been parsed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from enum import Enum
from typing import Optional


class TransportMode(Enum):
    """Travel mode understood by the directions provider.

    The value is the wire string stored in the order's ``mode`` field.
    """

    DRIVING = "driving"
    WALKING = "walking"
    BICYCLING = "bicycling"
    TRANSIT = "transit"

    @classmethod
    def parse(cls, value: str) -> TransportMode:
        """Parse a mode name, ignoring case and surrounding whitespace.

        Raises:
            ValueError: If the name is not a known mode.
        """
        normalized = value.strip().lower()
        for mode in cls:
            if mode.value == normalized:
                return mode
        raise ValueError(f"Unknown transport mode: {value!r}")


DEFAULT_TRANSPORT_MODE = TransportMode.WALKING


class LocationKind(Enum):
    """Which of the two tracked points an update refers to.

    The value doubles as the store field name.
    """

    CURRENT = "current"
    TARGET = "target"


MODE_FIELD = "mode"


@dataclass(frozen=True, slots=True)
class GeoPoint:
    """A latitude/longitude pair in degrees.

    No range check is applied here; out-of-range values are passed
    through and left to the directions provider.
    """

    latitude: float
    longitude: float


@dataclass(frozen=True, slots=True)
class RouteLeg:
    """One leg of a provider route."""

    duration: timedelta
    distance_meters: Optional[float] = None


@dataclass(frozen=True, slots=True)
class DirectionsRoute:
    """A route returned by the directions provider."""

    legs: tuple[RouteLeg, ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class UpdateResult:
    """Outcome of applying a point update to an order.

    Attributes:
        order_id: Order that was updated
        kind: Which point was written
        travel_time: Estimated travel time, or None when no estimate
            could be made yet
        published: Whether the travel time was forwarded downstream
    """

    order_id: str
    kind: LocationKind
    travel_time: Optional[timedelta] = None
    published: bool = False

    @property
    def has_estimate(self) -> bool:
        """Check if a travel time was computed."""
        return self.travel_time is not None

    @property
    def travel_time_seconds(self) -> Optional[float]:
        """Return the travel time in seconds, if any."""
        if self.travel_time is None:
            return None
        return self.travel_time.total_seconds()
