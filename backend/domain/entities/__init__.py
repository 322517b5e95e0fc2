"""
Domain Entities

Entities are business objects with identity and lifecycle.
They are mutable and have a unique identifier that persists through their lifetime.

- Vehicle: aggregate root for a fleet vehicle and its current rental
"""

from .vehicle import Vehicle

__all__ = ["Vehicle"]
