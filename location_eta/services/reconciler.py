"""Order update reconciler - Main orchestrator.

The reconciler holds no per-order state. Every update is written to
the store first, then the order is read back and the applicable step
(no estimate yet, estimate, estimate and publish) is derived from the
fields that are present.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import timedelta

from ..domain.errors import FieldNotFoundError
from ..domain.models import (
    DEFAULT_TRANSPORT_MODE,
    GeoPoint,
    LocationKind,
    TransportMode,
    UpdateResult,
)
from ..ports.publishing import TravelTimePublisherPort
from .estimator import TravelTimeEstimator
from .state_store import OrderStateStore


@dataclass
class OrderUpdateReconciler:
    """Apply point and mode updates to orders.

    Attributes:
        store: Typed order field store
        estimator: Travel time estimator
        publisher: Downstream travel-time sink
    """

    store: OrderStateStore
    estimator: TravelTimeEstimator
    publisher: TravelTimePublisherPort

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def apply_point_update(
        self,
        order_id: str,
        point: GeoPoint,
        kind: LocationKind,
    ) -> UpdateResult:
        """Store a new current or target point and refresh the estimate.

        Args:
            order_id: The order to update.
            point: The reported point.
            kind: Whether ``point`` is the current or the target position.

        Returns:
            UpdateResult; ``travel_time`` is None while one of the two
            points is still unknown.

        Raises:
            StoreWriteError: If the point could not be written.
            StoreReadError: If the order could not be read back.
            MalformedCoordinateError: If ``point`` is not finite or a stored
                point is corrupt.
            NoRouteFoundError: If no route exists between the points.
            ProviderError: If the directions provider failed.
            PublishError: If the estimate could not be forwarded.
        """
        self._logger.info(
            "Applying point update",
            extra={"order_id": order_id, "kind": kind.value},
        )

        # Step 1: Persist the new point
        self.store.set_point(order_id, kind, point)

        # Step 2: Read back both points; one may legitimately be missing
        try:
            current = self.store.get_point(order_id, LocationKind.CURRENT)
            target = self.store.get_point(order_id, LocationKind.TARGET)
        except FieldNotFoundError as e:
            self._logger.info(
                "Order incomplete, no estimate yet",
                extra={"order_id": order_id, "missing": e.field_name},
            )
            return UpdateResult(order_id=order_id, kind=kind)

        # Step 3: Mode is optional context
        mode = self._read_mode(order_id)

        # Step 4: Estimate
        travel_time = self.estimator.estimate(current, target, mode)
        self._logger.info(
            "Travel time computed",
            extra={
                "order_id": order_id,
                "kind": kind.value,
                "mode": mode,
                "travel_time_seconds": travel_time.total_seconds(),
            },
        )

        # Step 5: Publish
        if not self._should_publish(kind, travel_time):
            self._logger.info(
                "Skipping publish of non-positive travel time",
                extra={"order_id": order_id, "kind": kind.value},
            )
            return UpdateResult(order_id=order_id, kind=kind, travel_time=travel_time)

        self.publisher.publish(order_id, travel_time)
        return UpdateResult(
            order_id=order_id,
            kind=kind,
            travel_time=travel_time,
            published=True,
        )

    def apply_mode_update(self, order_id: str, mode: TransportMode) -> None:
        """Store a new transport mode.

        The next point update picks the mode up; no estimate is
        computed here.

        Raises:
            StoreWriteError: If the mode could not be written.
        """
        self._logger.info(
            "Applying mode update",
            extra={"order_id": order_id, "mode": mode.value},
        )
        self.store.set_mode(order_id, mode)

    def _read_mode(self, order_id: str) -> str:
        try:
            return self.store.get_mode(order_id)
        except FieldNotFoundError:
            self._logger.debug(
                "No mode stored, using default",
                extra={"order_id": order_id, "mode": DEFAULT_TRANSPORT_MODE.value},
            )
            return DEFAULT_TRANSPORT_MODE.value

    @staticmethod
    def _should_publish(kind: LocationKind, travel_time: timedelta) -> bool:
        # Zero-length estimates on target updates are dropped
        if kind is LocationKind.TARGET:
            return travel_time > timedelta(0)
        return True
