"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the application to external systems:
- Order state stores (Redis, in-memory)
- Directions providers (Google Maps)
- Travel-time sinks (log, webhook)
"""
