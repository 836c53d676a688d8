"""Google Maps Directions adapter.

Calls the Directions web service over HTTP with a shared
requests.Session and turns its JSON answer into DirectionsRoute
models. Provider statuses are mapped as the Maps client libraries do:
``OK`` and ``ZERO_RESULTS`` are answers, every other status is an error.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any, Dict, List, Optional, Sequence

import requests

from ...config import DirectionsConfig, get_config
from ...domain.codec import encode_point
from ...domain.errors import ConfigurationError, ProviderError
from ...domain.models import DirectionsRoute, GeoPoint, RouteLeg, TransportMode

DIRECTIONS_PATH = "/maps/api/directions/json"

# Statuses meaning "the request was fine, there is just nothing to return"
_EMPTY_STATUSES = {"ZERO_RESULTS", "NOT_FOUND"}

# Statuses worth retrying later
_TRANSIENT_STATUSES = {"OVER_QUERY_LIMIT", "UNKNOWN_ERROR"}


@dataclass
class GoogleDirectionsAdapter:
    """Google Directions implementation of DirectionsPort.

    Attributes:
        config: Directions configuration
        session: Optional pre-built HTTP session (tests, custom adapters)
    """

    config: DirectionsConfig = field(default_factory=lambda: get_config().directions)
    session: Optional[requests.Session] = field(default=None, repr=False)

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def _get_session(self) -> requests.Session:
        """Get or initialize the HTTP session."""
        if self.session is None:
            self.session = requests.Session()
        return self.session

    def route(
        self,
        origin: GeoPoint,
        destination: GeoPoint,
        mode: TransportMode,
    ) -> Sequence[DirectionsRoute]:
        """Request routes from the Directions API.

        Raises:
            ConfigurationError: If no API key is configured.
            ProviderError: On network errors, HTTP errors, unreadable
                bodies and non-OK provider statuses.
        """
        if not self.config.api_key:
            raise ConfigurationError(
                "Directions API key is not configured",
                setting_name="directions.api_key",
            )

        params = {
            "origin": encode_point(origin),
            "destination": encode_point(destination),
            "mode": mode.value,
            "key": self.config.api_key,
        }
        url = self.config.base_url.rstrip("/") + DIRECTIONS_PATH

        self._logger.debug(
            "Requesting directions",
            extra={
                "origin": params["origin"],
                "destination": params["destination"],
                "mode": mode.value,
            },
        )

        try:
            response = self._get_session().get(
                url, params=params, timeout=self.config.timeout_seconds
            )
        except requests.RequestException as e:
            self._logger.warning(
                "Directions request failed",
                extra={"error": str(e)},
            )
            raise ProviderError(
                "Directions request failed",
                is_transient=True,
                cause=e,
            ) from e

        if response.status_code != 200:
            raise ProviderError(
                f"Directions API returned HTTP {response.status_code}",
                status=str(response.status_code),
                is_transient=response.status_code >= 500,
            )

        try:
            payload: Dict[str, Any] = response.json()
        except ValueError as e:
            raise ProviderError(
                "Directions API returned a non-JSON body",
                cause=e,
            ) from e

        status = payload.get("status", "")
        if status in _EMPTY_STATUSES:
            self._logger.info(
                "Directions API found no route",
                extra={"status": status, "mode": mode.value},
            )
            return []

        if status != "OK":
            self._logger.warning(
                "Directions API error",
                extra={"status": status, "error": payload.get("error_message")},
            )
            raise ProviderError(
                payload.get("error_message") or f"Directions API status {status}",
                status=status,
                is_transient=status in _TRANSIENT_STATUSES,
            )

        return self._parse_routes(payload.get("routes") or [])

    def _parse_routes(self, raw_routes: List[Dict[str, Any]]) -> List[DirectionsRoute]:
        try:
            return [
                DirectionsRoute(
                    legs=tuple(
                        RouteLeg(
                            duration=timedelta(seconds=leg["duration"]["value"]),
                            distance_meters=(leg.get("distance") or {}).get("value"),
                        )
                        for leg in raw.get("legs") or []
                    )
                )
                for raw in raw_routes
            ]
        except (KeyError, TypeError) as e:
            raise ProviderError(
                "Directions API returned an unexpected route shape",
                cause=e,
            ) from e

    def close(self) -> None:
        """Close the HTTP session."""
        if self.session is not None:
            self.session.close()
            self.session = None
