"""
Dependency injection providers for FastAPI.

This module provides factory functions for creating repository and service instances,
following the Dependency Inversion Principle. Tests swap the repository through
app.dependency_overrides[get_vehicle_repository].
"""

from fastapi import Depends
from pymongo.database import Database

from database import get_db
from repositories.interfaces import IVehicleRepository
from repositories.vehicle_repository import MongoVehicleRepository
from services.fleet_service import FleetService
from services.interfaces import IFleetService, IRentalService
from services.rental_service import RentalService


def get_vehicle_repository(db: Database = Depends(get_db)) -> IVehicleRepository:
    """
    Factory function for creating the vehicle repository.

    Args:
        db: Database handle (injected)

    Returns:
        IVehicleRepository: MongoDB-backed implementation
    """
    return MongoVehicleRepository(db)


def get_rental_service(
    vehicle_repository: IVehicleRepository = Depends(get_vehicle_repository),
) -> IRentalService:
    """
    Factory function for creating RentalService instances.

    Returns:
        IRentalService: Rental service implementation
    """
    return RentalService(vehicle_repository)


def get_fleet_service(
    vehicle_repository: IVehicleRepository = Depends(get_vehicle_repository),
) -> IFleetService:
    """
    Factory function for creating FleetService instances.

    Returns:
        IFleetService: Fleet service implementation
    """
    return FleetService(vehicle_repository)
