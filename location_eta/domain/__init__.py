"""Domain layer - Core models, codec and errors.

This module contains immutable domain models, the coordinate codec
and typed errors used throughout the application. No external
dependencies.
"""

from .codec import decode_point, encode_point
from .errors import (
    ConfigurationError,
    FieldNotFoundError,
    LocationEtaError,
    MalformedCoordinateError,
    NoRouteFoundError,
    ProviderError,
    PublishError,
    StoreReadError,
    StoreWriteError,
)
from .models import (
    DEFAULT_TRANSPORT_MODE,
    MODE_FIELD,
    DirectionsRoute,
    GeoPoint,
    LocationKind,
    RouteLeg,
    TransportMode,
    UpdateResult,
)

__all__ = [
    # Models
    "GeoPoint",
    "TransportMode",
    "DEFAULT_TRANSPORT_MODE",
    "LocationKind",
    "MODE_FIELD",
    "RouteLeg",
    "DirectionsRoute",
    "UpdateResult",
    # Codec
    "encode_point",
    "decode_point",
    # Errors
    "LocationEtaError",
    "StoreWriteError",
    "StoreReadError",
    "FieldNotFoundError",
    "MalformedCoordinateError",
    "ProviderError",
    "NoRouteFoundError",
    "PublishError",
    "ConfigurationError",
]
