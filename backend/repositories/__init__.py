"""
Repository layer for data access abstraction.

This package contains the vehicle persistence port and its MongoDB adapter,
which encapsulate document-store queries behind a domain-level interface.
"""

from .base_repository import BaseRepository
from .interfaces import IVehicleRepository
from .vehicle_repository import MongoVehicleRepository, ensure_vehicle_indexes

__all__ = [
    "BaseRepository",
    "IVehicleRepository",
    "MongoVehicleRepository",
    "ensure_vehicle_indexes",
]
