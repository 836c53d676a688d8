"""Publishing port - Abstraction for the downstream travel-time sink."""

from __future__ import annotations

from datetime import timedelta
from typing import Protocol


class TravelTimePublisherPort(Protocol):
    """Port for forwarding computed travel times.

    Implementations:
    - adapters/publishing/log_publisher.py (LoggingPublisher) - Baseline
    - adapters/publishing/webhook_publisher.py (WebhookPublisher) - HTTP sink
    """

    def publish(self, order_id: str, travel_time: timedelta) -> None:
        """Forward a travel time for an order.

        Args:
            order_id: The order the estimate belongs to.
            travel_time: The estimated travel time.

        Raises:
            PublishError: If the sink rejected or never received it.
        """
        ...
