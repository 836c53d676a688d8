"""Request and response bodies of the HTTP API."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..domain.models import GeoPoint, TransportMode


class LocationUpdateRequest(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    order_id: str = Field(min_length=1)
    lat: float
    lng: float

    def to_point(self) -> GeoPoint:
        return GeoPoint(latitude=self.lat, longitude=self.lng)


class TransportUpdateRequest(BaseModel):
    order_id: str = Field(min_length=1)
    mode: TransportMode

    @field_validator("mode", mode="before")
    @classmethod
    def _parse_mode(cls, value: object) -> object:
        if isinstance(value, str):
            return TransportMode.parse(value)
        return value


class LocationUpdateResponse(BaseModel):
    order_id: str
    kind: str
    travel_time_seconds: Optional[float] = None
    published: bool = False


class TransportUpdateResponse(BaseModel):
    order_id: str
    mode: str


class ErrorResponse(BaseModel):
    detail: str
    error_type: Optional[str] = None


class HealthResponse(BaseModel):
    status: str
    store: bool
