"""Publishing adapters - Implementations of TravelTimePublisherPort.

Available implementations:
- LoggingPublisher: Logs travel times (baseline)
- WebhookPublisher: POSTs travel times to an HTTP endpoint
"""

from .log_publisher import LoggingPublisher
from .webhook_publisher import WebhookPublisher

__all__ = ["LoggingPublisher", "WebhookPublisher"]
