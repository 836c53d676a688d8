"""Tests for OrderUpdateReconciler."""

from datetime import timedelta
from unittest.mock import MagicMock

import pytest

from location_eta.domain.errors import (
    MalformedCoordinateError,
    NoRouteFoundError,
    ProviderError,
    PublishError,
    StoreReadError,
    StoreWriteError,
)
from location_eta.domain.models import GeoPoint, LocationKind, TransportMode
from location_eta.services import (
    OrderStateStore,
    OrderUpdateReconciler,
    TravelTimeEstimator,
)

from .fakes import FakeDirections, RecordingPublisher

CURRENT = GeoPoint(37.1, -122.1)
TARGET = GeoPoint(37.0, -122.0)


def build(state_store, directions, publisher=None):
    return OrderUpdateReconciler(
        store=state_store,
        estimator=TravelTimeEstimator(directions=directions),
        publisher=publisher or RecordingPublisher(),
    )


class TestPointUpdateWithoutBothPoints:
    def test_current_without_target_gives_no_estimate(
        self, reconciler, state_store, directions, publisher
    ):
        result = reconciler.apply_point_update("A1", CURRENT, LocationKind.CURRENT)

        assert result.travel_time is None
        assert not result.published
        assert state_store.get_point("A1", LocationKind.CURRENT) == CURRENT
        assert directions.calls == []
        assert publisher.published == []

    def test_target_without_current_gives_no_estimate(
        self, reconciler, state_store, directions
    ):
        result = reconciler.apply_point_update("A1", TARGET, LocationKind.TARGET)

        assert not result.has_estimate
        assert state_store.get_point("A1", LocationKind.TARGET) == TARGET
        assert directions.calls == []


class TestPointUpdateWithBothPoints:
    def test_scenario_default_mode_and_publish(
        self, reconciler, state_store, directions, publisher
    ):
        state_store.set_point("A1", LocationKind.TARGET, TARGET)

        result = reconciler.apply_point_update("A1", CURRENT, LocationKind.CURRENT)

        assert directions.calls == [(CURRENT, TARGET, TransportMode.WALKING)]
        assert result.travel_time == timedelta(seconds=600)
        assert result.published
        assert publisher.published == [("A1", timedelta(seconds=600))]

    def test_uses_stored_mode(self, reconciler, state_store, directions):
        state_store.set_point("B2", LocationKind.CURRENT, CURRENT)
        state_store.set_mode("B2", TransportMode.DRIVING)

        result = reconciler.apply_point_update("B2", TARGET, LocationKind.TARGET)

        assert directions.calls == [(CURRENT, TARGET, TransportMode.DRIVING)]
        assert result.travel_time == timedelta(seconds=600)

    def test_target_update_with_zero_duration_is_not_published(
        self, state_store, publisher
    ):
        reconciler = build(state_store, FakeDirections(seconds=0), publisher)
        state_store.set_point("A1", LocationKind.CURRENT, CURRENT)

        result = reconciler.apply_point_update("A1", TARGET, LocationKind.TARGET)

        assert result.travel_time == timedelta(0)
        assert not result.published
        assert publisher.published == []

    def test_current_update_with_zero_duration_is_published(
        self, state_store, publisher
    ):
        reconciler = build(state_store, FakeDirections(seconds=0), publisher)
        state_store.set_point("A1", LocationKind.TARGET, TARGET)

        result = reconciler.apply_point_update("A1", CURRENT, LocationKind.CURRENT)

        assert result.published
        assert publisher.published == [("A1", timedelta(0))]

    def test_target_update_with_positive_duration_is_published(
        self, reconciler, state_store, publisher
    ):
        state_store.set_point("A1", LocationKind.CURRENT, CURRENT)

        result = reconciler.apply_point_update("A1", TARGET, LocationKind.TARGET)

        assert result.published
        assert publisher.published == [("A1", timedelta(seconds=600))]

    def test_latest_point_is_used(self, reconciler, state_store, directions):
        state_store.set_point("A1", LocationKind.TARGET, TARGET)
        reconciler.apply_point_update("A1", GeoPoint(1.0, 1.0), LocationKind.CURRENT)

        reconciler.apply_point_update("A1", CURRENT, LocationKind.CURRENT)

        assert directions.calls[-1] == (CURRENT, TARGET, TransportMode.WALKING)


class TestPointUpdateFailures:
    def test_no_route_is_surfaced_and_nothing_published(self, state_store, publisher):
        reconciler = build(state_store, FakeDirections(seconds=None), publisher)
        state_store.set_point("A1", LocationKind.TARGET, TARGET)

        with pytest.raises(NoRouteFoundError):
            reconciler.apply_point_update("A1", CURRENT, LocationKind.CURRENT)

        assert publisher.published == []

    def test_provider_error_is_surfaced(self, state_store, publisher):
        error = ProviderError("quota", status="OVER_QUERY_LIMIT", is_transient=True)
        reconciler = build(state_store, FakeDirections(error=error), publisher)
        state_store.set_point("A1", LocationKind.TARGET, TARGET)

        with pytest.raises(ProviderError):
            reconciler.apply_point_update("A1", CURRENT, LocationKind.CURRENT)

        assert publisher.published == []

    def test_unknown_stored_mode_is_provider_error(
        self, reconciler, state_store, directions
    ):
        state_store.set_point("A1", LocationKind.TARGET, TARGET)
        state_store.set_field("A1", "mode", "rocket")

        with pytest.raises(ProviderError):
            reconciler.apply_point_update("A1", CURRENT, LocationKind.CURRENT)

        assert directions.calls == []

    def test_corrupt_stored_point_is_malformed(self, reconciler, state_store):
        state_store.set_field("A1", "target", "garbage")

        with pytest.raises(MalformedCoordinateError):
            reconciler.apply_point_update("A1", CURRENT, LocationKind.CURRENT)

    def test_non_finite_point_is_rejected_before_write(
        self, reconciler, state_store, memory_store, directions
    ):
        state_store.set_point("A1", LocationKind.TARGET, TARGET)

        with pytest.raises(MalformedCoordinateError):
            reconciler.apply_point_update(
                "A1", GeoPoint(float("inf"), -122.1), LocationKind.CURRENT
            )

        assert "current" not in memory_store.snapshot("A1")
        assert directions.calls == []

        result = reconciler.apply_point_update("A1", CURRENT, LocationKind.CURRENT)
        assert result.published

    def test_publish_error_is_surfaced(self, state_store):
        publisher = RecordingPublisher(error=PublishError("sink down", order_id="A1"))
        reconciler = build(state_store, FakeDirections(), publisher)
        state_store.set_point("A1", LocationKind.TARGET, TARGET)

        with pytest.raises(PublishError):
            reconciler.apply_point_update("A1", CURRENT, LocationKind.CURRENT)

    def test_write_failure_is_terminal(self, directions, publisher):
        backend = MagicMock()
        backend.hset.side_effect = StoreWriteError("down", order_id="A1")
        reconciler = build(OrderStateStore(backend=backend), directions, publisher)

        with pytest.raises(StoreWriteError):
            reconciler.apply_point_update("A1", CURRENT, LocationKind.CURRENT)

        backend.hget.assert_not_called()
        assert directions.calls == []

    def test_read_failure_is_not_treated_as_missing(self, directions, publisher):
        backend = MagicMock()
        backend.hget.side_effect = StoreReadError("down", order_id="A1")
        reconciler = build(OrderStateStore(backend=backend), directions, publisher)

        with pytest.raises(StoreReadError):
            reconciler.apply_point_update("A1", CURRENT, LocationKind.CURRENT)


class TestModeUpdate:
    def test_mode_update_only_writes_mode(
        self, reconciler, state_store, directions, publisher
    ):
        state_store.set_point("A1", LocationKind.CURRENT, CURRENT)
        state_store.set_point("A1", LocationKind.TARGET, TARGET)

        reconciler.apply_mode_update("A1", TransportMode.DRIVING)

        assert state_store.get_field("A1", "mode") == "driving"
        assert directions.calls == []
        assert publisher.published == []

    def test_mode_update_does_not_read_back(self, directions, publisher):
        backend = MagicMock()
        reconciler = build(OrderStateStore(backend=backend), directions, publisher)

        reconciler.apply_mode_update("A1", TransportMode.TRANSIT)

        backend.hset.assert_called_once_with("A1", "mode", "transit")
        backend.hget.assert_not_called()

    def test_mode_update_write_failure(self, directions, publisher):
        backend = MagicMock()
        backend.hset.side_effect = StoreWriteError("down", order_id="A1")
        reconciler = build(OrderStateStore(backend=backend), directions, publisher)

        with pytest.raises(StoreWriteError):
            reconciler.apply_mode_update("A1", TransportMode.TRANSIT)
