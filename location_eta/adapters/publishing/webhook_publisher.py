"""Webhook publisher - forwards travel times to an HTTP endpoint.

Each travel time is POSTed as JSON:

    {"order_id": "A1", "travel_time_seconds": 600.0}

Any non-2xx answer or network failure becomes a PublishError.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Optional

import requests

from ...config import PublisherConfig, get_config
from ...domain.errors import ConfigurationError, PublishError


@dataclass
class WebhookPublisher:
    """HTTP implementation of TravelTimePublisherPort.

    Attributes:
        config: Publisher configuration (``webhook_url`` is required)
        session: Optional pre-built HTTP session
    """

    config: PublisherConfig = field(default_factory=lambda: get_config().publisher)
    session: Optional[requests.Session] = field(default=None, repr=False)

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        if not self.config.webhook_url:
            raise ConfigurationError(
                "Webhook publisher requires a webhook URL",
                setting_name="publisher.webhook_url",
            )

    def _get_session(self) -> requests.Session:
        if self.session is None:
            self.session = requests.Session()
        return self.session

    def publish(self, order_id: str, travel_time: timedelta) -> None:
        """POST the travel time to the configured webhook.

        Raises:
            PublishError: If the request failed or was rejected.
        """
        body = {
            "order_id": order_id,
            "travel_time_seconds": travel_time.total_seconds(),
        }
        try:
            response = self._get_session().post(
                self.config.webhook_url,  # type: ignore[arg-type]
                json=body,
                timeout=self.config.timeout_seconds,
            )
            response.raise_for_status()
        except requests.RequestException as e:
            self._logger.error(
                "Travel time publish failed",
                extra={"order_id": order_id, "error": str(e)},
            )
            raise PublishError(
                f"Failed to publish travel time for order {order_id}",
                order_id=order_id,
                cause=e,
            ) from e

        self._logger.info(
            "Travel time published",
            extra=body,
        )

    def close(self) -> None:
        """Close the HTTP session."""
        if self.session is not None:
            self.session.close()
            self.session = None
