"""HTTP boundary of the service."""

from .http_api import create_app

__all__ = ["create_app"]
