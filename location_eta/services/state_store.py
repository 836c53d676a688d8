"""Typed accessor over the per-order field store."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ..domain.codec import decode_point, encode_point
from ..domain.errors import FieldNotFoundError
from ..domain.models import MODE_FIELD, GeoPoint, LocationKind, TransportMode
from ..ports.store import HashStorePort


@dataclass
class OrderStateStore:
    """Get/set named fields of an order.

    Every call is a round-trip to the backing store; nothing is cached
    because other replicas may write the same order concurrently.

    Attributes:
        backend: The raw hash store
    """

    backend: HashStorePort

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def set_field(self, order_id: str, field_name: str, value: str) -> None:
        """Write one field.

        Raises:
            StoreWriteError: If the write failed.
        """
        self.backend.hset(order_id, field_name, value)

    def get_field(self, order_id: str, field_name: str) -> str:
        """Read one field.

        Raises:
            FieldNotFoundError: If the field was never written.
            StoreReadError: If the store could not be read.
        """
        value = self.backend.hget(order_id, field_name)
        if value is None:
            raise FieldNotFoundError(
                f"Order {order_id} has no {field_name} field",
                order_id=order_id,
                field_name=field_name,
            )
        return value

    def set_point(self, order_id: str, kind: LocationKind, point: GeoPoint) -> None:
        self.set_field(order_id, kind.value, encode_point(point))

    def get_point(self, order_id: str, kind: LocationKind) -> GeoPoint:
        """Read and decode one of the order's points.

        Raises:
            FieldNotFoundError: If the point was never written.
            MalformedCoordinateError: If the stored value is corrupt.
        """
        return decode_point(self.get_field(order_id, kind.value))

    def set_mode(self, order_id: str, mode: TransportMode) -> None:
        self.set_field(order_id, MODE_FIELD, mode.value)

    def get_mode(self, order_id: str) -> str:
        """Read the raw stored mode string."""
        return self.get_field(order_id, MODE_FIELD)
