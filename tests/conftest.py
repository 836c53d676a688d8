"""Shared fixtures: in-memory store, scripted directions, recording publisher."""

from __future__ import annotations

import os

import pytest

from location_eta.adapters.store import InMemoryHashStore
from location_eta.config import reset_config
from location_eta.container import reset_container
from location_eta.services import (
    OrderStateStore,
    OrderUpdateReconciler,
    TravelTimeEstimator,
)

from .fakes import FakeDirections, RecordingPublisher


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch):
    """Keep LETA_* settings from the host environment out of the tests."""
    for name in list(os.environ):
        if name.startswith("LETA_"):
            monkeypatch.delenv(name, raising=False)
    reset_config()
    reset_container()
    yield
    reset_container()
    reset_config()


@pytest.fixture
def memory_store() -> InMemoryHashStore:
    return InMemoryHashStore()


@pytest.fixture
def state_store(memory_store) -> OrderStateStore:
    return OrderStateStore(backend=memory_store)


@pytest.fixture
def directions() -> FakeDirections:
    return FakeDirections()


@pytest.fixture
def publisher() -> RecordingPublisher:
    return RecordingPublisher()


@pytest.fixture
def reconciler(state_store, directions, publisher) -> OrderUpdateReconciler:
    return OrderUpdateReconciler(
        store=state_store,
        estimator=TravelTimeEstimator(directions=directions),
        publisher=publisher,
    )
