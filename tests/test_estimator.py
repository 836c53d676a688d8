"""Tests for TravelTimeEstimator."""

from datetime import timedelta

import pytest

from location_eta.domain.errors import NoRouteFoundError, ProviderError
from location_eta.domain.models import (
    DirectionsRoute,
    GeoPoint,
    RouteLeg,
    TransportMode,
)
from location_eta.services import TravelTimeEstimator

from .fakes import FakeDirections

ORIGIN = GeoPoint(37.1, -122.1)
DESTINATION = GeoPoint(37.0, -122.0)


class StaticDirections:
    def __init__(self, routes):
        self.routes = routes

    def route(self, origin, destination, mode):
        return self.routes


class TestTravelTimeEstimator:
    def test_returns_first_leg_of_first_route(self):
        routes = [
            DirectionsRoute(
                legs=(
                    RouteLeg(duration=timedelta(seconds=300)),
                    RouteLeg(duration=timedelta(seconds=900)),
                )
            ),
            DirectionsRoute(legs=(RouteLeg(duration=timedelta(seconds=60)),)),
        ]
        estimator = TravelTimeEstimator(directions=StaticDirections(routes))

        assert estimator.estimate(ORIGIN, DESTINATION, TransportMode.DRIVING) == timedelta(
            seconds=300
        )

    def test_passes_points_and_mode_to_provider(self):
        directions = FakeDirections(seconds=120)
        estimator = TravelTimeEstimator(directions=directions)

        estimator.estimate(ORIGIN, DESTINATION, TransportMode.BICYCLING)

        assert directions.calls == [(ORIGIN, DESTINATION, TransportMode.BICYCLING)]

    def test_parses_raw_mode_string(self):
        directions = FakeDirections(seconds=120)
        estimator = TravelTimeEstimator(directions=directions)

        estimator.estimate(ORIGIN, DESTINATION, "driving")

        assert directions.calls[0][2] is TransportMode.DRIVING

    def test_unknown_mode_is_provider_error_without_calling_provider(self):
        directions = FakeDirections(seconds=120)
        estimator = TravelTimeEstimator(directions=directions)

        with pytest.raises(ProviderError) as exc_info:
            estimator.estimate(ORIGIN, DESTINATION, "hovercraft")

        assert exc_info.value.status == "INVALID_REQUEST"
        assert directions.calls == []

    def test_zero_routes_is_no_route(self):
        estimator = TravelTimeEstimator(directions=StaticDirections([]))

        with pytest.raises(NoRouteFoundError) as exc_info:
            estimator.estimate(ORIGIN, DESTINATION, TransportMode.WALKING)

        assert exc_info.value.mode == "walking"
        assert exc_info.value.origin == "37.100000,-122.100000"

    def test_route_without_legs_is_no_route(self):
        estimator = TravelTimeEstimator(
            directions=StaticDirections([DirectionsRoute(legs=())])
        )

        with pytest.raises(NoRouteFoundError):
            estimator.estimate(ORIGIN, DESTINATION, TransportMode.WALKING)

    def test_provider_error_propagates(self):
        error = ProviderError("quota", status="OVER_QUERY_LIMIT", is_transient=True)
        estimator = TravelTimeEstimator(directions=FakeDirections(error=error))

        with pytest.raises(ProviderError) as exc_info:
            estimator.estimate(ORIGIN, DESTINATION, TransportMode.WALKING)

        assert exc_info.value is error

    def test_unexpected_exception_is_wrapped(self):
        boom = RuntimeError("boom")
        estimator = TravelTimeEstimator(directions=FakeDirections(error=boom))

        with pytest.raises(ProviderError) as exc_info:
            estimator.estimate(ORIGIN, DESTINATION, TransportMode.WALKING)

        assert exc_info.value.cause is boom

    def test_single_attempt(self):
        directions = FakeDirections(error=ProviderError("down", is_transient=True))
        estimator = TravelTimeEstimator(directions=directions)

        with pytest.raises(ProviderError):
            estimator.estimate(ORIGIN, DESTINATION, TransportMode.WALKING)

        assert len(directions.calls) == 1
