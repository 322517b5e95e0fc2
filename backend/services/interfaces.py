"""
Service Interfaces

Abstract base classes for service layer following Dependency Inversion Principle.
This allows for dependency injection and easier testing/mocking.
"""

from abc import ABC, abstractmethod
from datetime import date
from typing import List, Optional

from domain.entities import Vehicle
from domain.value_objects import VehicleId, VehicleStatus


class IRentalService(ABC):
    """
    Rental workflow: renting and returning vehicles.

    Enforces the rule that a customer holds at most one active rental.
    """

    @abstractmethod
    def rent_vehicle(self, vehicle_id: VehicleId, customer_id: str) -> Vehicle:
        """
        Rent a vehicle to a customer.

        Args:
            vehicle_id: Vehicle to rent
            customer_id: Customer renting the vehicle

        Returns:
            The rented vehicle

        Raises:
            ValidationError: If customer_id is blank
            NotFoundError: If the vehicle does not exist
            ConflictError: If the customer already rents a vehicle or the
                vehicle is not available
        """
        pass

    @abstractmethod
    def return_vehicle(self, vehicle_id: VehicleId, customer_id: str) -> Vehicle:
        """
        Return a rented vehicle.

        Raises:
            ValidationError: If customer_id is blank
            NotFoundError: If the vehicle does not exist
            ConflictError: If the vehicle is not rented by this customer
        """
        pass

    @abstractmethod
    def get_available_vehicles(self) -> List[Vehicle]:
        """Get all vehicles available for rental."""
        pass

    @abstractmethod
    def get_customer_rented_vehicle(self, customer_id: str) -> Optional[Vehicle]:
        """
        Get the vehicle currently rented by a customer.

        Returns:
            The vehicle, or None if the customer has no active rental

        Raises:
            ValidationError: If customer_id is blank
        """
        pass


class IFleetService(ABC):
    """
    Fleet administration: registering vehicles and overriding their status.
    """

    @abstractmethod
    def register_vehicle(self, license_plate: str, manufacturing_date: date, model: str, brand: str) -> Vehicle:
        """
        Add a new vehicle to the fleet.

        Raises:
            ValidationError: If any attribute is invalid
            ConflictError: If the license plate is already registered
        """
        pass

    @abstractmethod
    def get_vehicle(self, vehicle_id: VehicleId) -> Vehicle:
        """
        Get a vehicle by id.

        Raises:
            NotFoundError: If the vehicle does not exist
        """
        pass

    @abstractmethod
    def set_vehicle_status(self, vehicle_id: VehicleId, status: VehicleStatus) -> Vehicle:
        """
        Administrative status override (maintenance, retirement, reinstatement).

        Raises:
            ValidationError: If status is RENTED (use the rental workflow)
            NotFoundError: If the vehicle does not exist
        """
        pass
