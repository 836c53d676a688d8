"""Dependency injection container.

This module provides a simple DI container without external frameworks.
Client handles (Redis pool, HTTP sessions) are built once per process
by the container and released by Container.close() at shutdown.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from .config import AppConfig, get_config

logger = logging.getLogger(__name__)


@dataclass
class Container:
    """Dependency injection container.

    Usage:
        # Production
        container = Container.create_default()
        reconciler = container.resolve(OrderUpdateReconciler)

        # Testing
        container = Container()
        container.register(DirectionsPort, lambda: FakeDirections())
        directions = container.resolve(DirectionsPort)

    Attributes:
        config: Application configuration
    """

    config: AppConfig = field(default_factory=get_config)

    _factories: Dict[type[Any], Callable[[], Any]] = field(
        default_factory=dict, repr=False
    )
    _singletons: Dict[type[Any], Any] = field(default_factory=dict, repr=False)
    _singleton_types: set[type[Any]] = field(default_factory=set, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def register(
        self,
        port_type: type[Any],
        factory: Callable[[], Any],
        singleton: bool = True,
    ) -> None:
        """Register a factory for a port type.

        Args:
            port_type: The type (usually a Protocol) to register.
            factory: A callable that creates instances of the type.
            singleton: If True, only one instance is created.
        """
        with self._lock:
            self._factories[port_type] = factory
            self._singletons.pop(port_type, None)
            if singleton:
                self._singleton_types.add(port_type)
            else:
                self._singleton_types.discard(port_type)

    def resolve(self, port_type: type[Any]) -> Any:
        """Resolve an instance of a port type.

        Raises:
            KeyError: If the type is not registered.
        """
        with self._lock:
            if port_type not in self._factories:
                raise KeyError(f"Type not registered: {port_type}")

            if port_type in self._singleton_types:
                if port_type not in self._singletons:
                    self._singletons[port_type] = self._factories[port_type]()
                return self._singletons[port_type]

            return self._factories[port_type]()

    def close(self) -> None:
        """Release resources held by singletons and forget them.

        Every created singleton exposing a ``close()`` method is closed.
        """
        with self._lock:
            for instance in self._singletons.values():
                close = getattr(instance, "close", None)
                if callable(close):
                    try:
                        close()
                    except Exception:
                        logger.exception(
                            "Failed to close resource",
                            extra={"resource": type(instance).__name__},
                        )
            self._singletons.clear()

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> Container:
        """Create a container with default production bindings.

        Args:
            config: Optional configuration override.

        Returns:
            A configured Container instance.
        """
        from .adapters.directions import GoogleDirectionsAdapter
        from .adapters.publishing import LoggingPublisher, WebhookPublisher
        from .adapters.store import InMemoryHashStore, RedisHashStore
        from .ports.directions import DirectionsPort
        from .ports.publishing import TravelTimePublisherPort
        from .ports.store import HashStorePort
        from .services import (
            OrderStateStore,
            OrderUpdateReconciler,
            TravelTimeEstimator,
        )

        config = config or get_config()
        container = cls(config=config)

        # Store backend based on config
        def create_store() -> HashStorePort:
            if config.store.backend == "memory":
                return InMemoryHashStore()
            return RedisHashStore(config.store)

        container.register(HashStorePort, create_store)

        # Directions
        container.register(
            DirectionsPort,
            lambda: GoogleDirectionsAdapter(config.directions),
        )

        # Publisher based on config
        def create_publisher() -> TravelTimePublisherPort:
            if config.publisher.kind == "webhook":
                return WebhookPublisher(config.publisher)
            return LoggingPublisher()

        container.register(TravelTimePublisherPort, create_publisher)

        # Services
        container.register(
            OrderStateStore,
            lambda: OrderStateStore(backend=container.resolve(HashStorePort)),
        )
        container.register(
            TravelTimeEstimator,
            lambda: TravelTimeEstimator(directions=container.resolve(DirectionsPort)),
        )

        def create_reconciler() -> OrderUpdateReconciler:
            return OrderUpdateReconciler(
                store=container.resolve(OrderStateStore),
                estimator=container.resolve(TravelTimeEstimator),
                publisher=container.resolve(TravelTimePublisherPort),
            )

        container.register(OrderUpdateReconciler, create_reconciler)

        return container


# Global default container (lazy initialized)
_default_container: Optional[Container] = None
_container_lock = threading.Lock()


def get_container() -> Container:
    """Get the default application container.

    Returns:
        The default Container instance (creates one if needed).
    """
    global _default_container
    if _default_container is None:
        with _container_lock:
            if _default_container is None:
                _default_container = Container.create_default()
    return _default_container


def reset_container() -> None:
    """Reset the default container.

    Call this in tests to ensure a fresh container.
    """
    global _default_container
    with _container_lock:
        if _default_container is not None:
            _default_container.close()
        _default_container = None
