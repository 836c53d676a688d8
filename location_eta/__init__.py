"""Top-level package for the Location ETA service.

The service keeps, per delivery order, a current and a target position
plus a transport mode in an external store, and publishes a refreshed
travel-time estimate whenever one of the positions changes.
"""

__version__ = "0.1.0"
