"""
Repository Interfaces

Abstract persistence contract for the Vehicle aggregate. The application
services depend on this port; MongoVehicleRepository is the production
adapter.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from domain.entities import Vehicle
from domain.value_objects import LicensePlate, VehicleId


class IVehicleRepository(ABC):
    """Persistence port for vehicles."""

    @abstractmethod
    def get_by_id(self, vehicle_id: VehicleId) -> Optional[Vehicle]:
        """
        Get a vehicle by its identifier.

        Returns:
            The vehicle, or None if not found
        """
        pass

    @abstractmethod
    def get_by_license_plate(self, license_plate: LicensePlate) -> Optional[Vehicle]:
        """Get a vehicle by its license plate, or None."""
        pass

    @abstractmethod
    def get_by_customer_id(self, customer_id: str) -> Optional[Vehicle]:
        """
        Get the vehicle currently rented by a customer.

        Args:
            customer_id: Customer identifier (exact match)

        Returns:
            The rented vehicle, or None if the customer has no active rental
        """
        pass

    @abstractmethod
    def get_available_vehicles(self) -> List[Vehicle]:
        """Get all vehicles whose status is AVAILABLE, in store order."""
        pass

    @abstractmethod
    def add(self, vehicle: Vehicle) -> None:
        """
        Insert a new vehicle.

        Raises:
            ConflictError: If the license plate is already registered
        """
        pass

    @abstractmethod
    def update(self, vehicle: Vehicle) -> None:
        """
        Persist changes to an existing vehicle.

        The write only succeeds if the stored version still matches
        vehicle.version; the vehicle's version is bumped on success.

        Raises:
            ConflictError: If the vehicle changed since it was loaded, or the
                renter already holds another rental
        """
        pass

    @abstractmethod
    def exists_with_license_plate(self, license_plate: LicensePlate) -> bool:
        """Check if a license plate is already registered."""
        pass
