"""Logging publisher - the baseline travel-time sink.

Records each travel time in the log and always succeeds. Used until a
real downstream integration is configured.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import timedelta


@dataclass
class LoggingPublisher:
    """TravelTimePublisherPort that only logs."""

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def publish(self, order_id: str, travel_time: timedelta) -> None:
        self._logger.info(
            "Publishing travel time for order %s: %s",
            order_id,
            travel_time,
            extra={
                "order_id": order_id,
                "travel_time_seconds": travel_time.total_seconds(),
            },
        )
