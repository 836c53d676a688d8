"""Typed domain errors for the Location ETA service.

Each failure mode of an order update has its own type so callers can
tell an expected absence of data (FieldNotFoundError) apart from a
transport failure, and a transient provider error apart from a request
for which no route exists.

All errors inherit from LocationEtaError and can optionally wrap a
root cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class LocationEtaError(Exception):
    """Base error for the location ETA domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class StoreWriteError(LocationEtaError):
    """Writing an order field to the store failed.

    Attributes:
        order_id: Order whose field could not be written
        field_name: Name of the field being written
    """

    order_id: str = ""
    field_name: str = ""


@dataclass
class StoreReadError(LocationEtaError):
    """Reading an order field from the store failed at the transport level.

    Not raised for fields that were simply never written, see
    FieldNotFoundError.

    Attributes:
        order_id: Order whose field could not be read
        field_name: Name of the field being read
    """

    order_id: str = ""
    field_name: str = ""


@dataclass
class FieldNotFoundError(LocationEtaError):
    """The requested order field has never been written.

    This is the common case for a brand-new order and is usually
    absorbed by the caller rather than reported.

    Attributes:
        order_id: Order that was looked up
        field_name: Name of the missing field
    """

    order_id: str = ""
    field_name: str = ""


@dataclass
class MalformedCoordinateError(LocationEtaError):
    """A stored coordinate value could not be decoded.

    Attributes:
        raw_value: The offending field value
    """

    raw_value: str = ""


@dataclass
class ProviderError(LocationEtaError):
    """The directions provider call failed.

    Attributes:
        status: Provider status code or HTTP status, if any
        is_transient: Whether retrying the same request may succeed
    """

    status: Optional[str] = None
    is_transient: bool = False


@dataclass
class NoRouteFoundError(LocationEtaError):
    """The provider answered, but no route exists for the request.

    Attributes:
        origin: Encoded origin coordinates
        destination: Encoded destination coordinates
        mode: Transport mode requested
    """

    origin: str = ""
    destination: str = ""
    mode: str = ""


@dataclass
class PublishError(LocationEtaError):
    """Forwarding a travel time downstream failed.

    Attributes:
        order_id: Order whose travel time could not be published
    """

    order_id: str = ""


@dataclass
class ConfigurationError(LocationEtaError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
    """

    setting_name: str = ""
