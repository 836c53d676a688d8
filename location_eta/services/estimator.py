"""Travel time estimation on top of a directions provider."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Union

from ..domain.codec import encode_point
from ..domain.errors import LocationEtaError, NoRouteFoundError, ProviderError
from ..domain.models import GeoPoint, TransportMode
from ..ports.directions import DirectionsPort


@dataclass
class TravelTimeEstimator:
    """Turn a directions lookup into a single travel duration.

    One provider request per call and no retries; whether a
    ProviderError is worth retrying is left to the caller.

    Attributes:
        directions: The directions provider
    """

    directions: DirectionsPort

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def estimate(
        self,
        current: GeoPoint,
        target: GeoPoint,
        mode: Union[TransportMode, str],
    ) -> timedelta:
        """Estimate the travel time from ``current`` to ``target``.

        Args:
            current: Origin of the trip.
            target: Destination of the trip.
            mode: Transport mode, or its raw stored name.

        Returns:
            Duration of the first leg of the first route.

        Raises:
            ProviderError: If the mode is unknown or the provider call failed.
            NoRouteFoundError: If the provider returned no usable route.
        """
        if isinstance(mode, str):
            try:
                mode = TransportMode.parse(mode)
            except ValueError as e:
                raise ProviderError(
                    f"Unsupported transport mode {mode!r}",
                    status="INVALID_REQUEST",
                    cause=e,
                ) from e

        try:
            routes = self.directions.route(current, target, mode)
        except LocationEtaError:
            raise
        except Exception as e:
            self._logger.exception("Unexpected directions provider failure")
            raise ProviderError("Directions provider failed", cause=e) from e

        if not routes or not routes[0].legs:
            self._logger.warning(
                "No route found",
                extra={
                    "origin": encode_point(current),
                    "destination": encode_point(target),
                    "mode": mode.value,
                    "routes": len(routes),
                },
            )
            raise NoRouteFoundError(
                "No directions found",
                origin=encode_point(current),
                destination=encode_point(target),
                mode=mode.value,
            )

        travel_time = routes[0].legs[0].duration
        self._logger.debug(
            "Travel time estimated",
            extra={"mode": mode.value, "seconds": travel_time.total_seconds()},
        )
        return travel_time
