"""Coordinate codec for the store's textual field representation.

Points are stored as ``"<lat>,<lng>"`` with six fractional digits,
about 0.1 m of precision, which is more than routing needs.
"""

from __future__ import annotations

import math

from .errors import MalformedCoordinateError
from .models import GeoPoint

COORDINATE_PRECISION = 6


def encode_point(point: GeoPoint) -> str:
    """Encode a point as a store field value.

    Args:
        point: The point to encode.

    Returns:
        Text of the form ``"37.100000,-122.100000"``.

    Raises:
        MalformedCoordinateError: If a component is not finite.
    """
    if not (math.isfinite(point.latitude) and math.isfinite(point.longitude)):
        raise MalformedCoordinateError(
            "Coordinate component is not finite",
            raw_value=f"{point.latitude},{point.longitude}",
        )

    return (
        f"{point.latitude:.{COORDINATE_PRECISION}f},"
        f"{point.longitude:.{COORDINATE_PRECISION}f}"
    )


def decode_point(value: str) -> GeoPoint:
    """Decode a store field value back into a point.

    Args:
        value: Text holding exactly two comma-separated numbers.

    Returns:
        The decoded point.

    Raises:
        MalformedCoordinateError: If the value is not two finite numbers.
    """
    parts = value.split(",")
    if len(parts) != 2:
        raise MalformedCoordinateError(
            f"Expected 'lat,lng', got {len(parts)} component(s)",
            raw_value=value,
        )

    try:
        latitude = float(parts[0])
        longitude = float(parts[1])
    except ValueError as e:
        raise MalformedCoordinateError(
            "Coordinate component is not a number",
            raw_value=value,
            cause=e,
        ) from e

    if not (math.isfinite(latitude) and math.isfinite(longitude)):
        raise MalformedCoordinateError(
            "Coordinate component is not finite",
            raw_value=value,
        )

    return GeoPoint(latitude=latitude, longitude=longitude)
