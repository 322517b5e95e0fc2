"""
Vehicle-specific Specifications

Concrete specifications for querying vehicles. Field names in the Mongo
filters match the persisted VehicleDocument aliases.
"""

from domain.entities import Vehicle
from domain.value_objects import LicensePlate, VehicleId, VehicleStatus
from .specifications import Specification


class VehicleByIdSpec(Specification[Vehicle]):
    """Specification for a single vehicle by identity."""

    def __init__(self, vehicle_id: VehicleId):
        self.vehicle_id = vehicle_id

    def is_satisfied_by(self, vehicle: Vehicle) -> bool:
        return vehicle.id == self.vehicle_id

    def to_mongo_filter(self):
        return {"_id": str(self.vehicle_id)}


class VehicleVersionSpec(Specification[Vehicle]):
    """Vehicles still at the version a caller loaded (conditional writes)."""

    def __init__(self, version: int):
        self.version = version

    def is_satisfied_by(self, vehicle: Vehicle) -> bool:
        return vehicle.version == self.version

    def to_mongo_filter(self):
        if self.version == 0:
            # documents written before versioning have no version field
            return {"$or": [{"version": 0}, {"version": {"$exists": False}}]}
        return {"version": self.version}


class VehicleStatusSpec(Specification[Vehicle]):
    """Specification for vehicles in a specific lifecycle state."""

    def __init__(self, status: VehicleStatus):
        """
        Initialize specification.

        Args:
            status: Vehicle status to filter by
        """
        self.status = status

    def is_satisfied_by(self, vehicle: Vehicle) -> bool:
        """Check if vehicle is in the specified state."""
        return vehicle.status is self.status

    def to_mongo_filter(self):
        """Status is stored as its integer value."""
        return {"status": int(self.status)}


class RentedByCustomerSpec(Specification[Vehicle]):
    """Specification for the vehicle a customer currently rents (exact match)."""

    def __init__(self, customer_id: str):
        """
        Initialize specification.

        Args:
            customer_id: Customer identifier, compared without normalisation
        """
        self.customer_id = customer_id

    def is_satisfied_by(self, vehicle: Vehicle) -> bool:
        """Check if the customer is the vehicle's current renter."""
        return vehicle.current_customer_id == self.customer_id

    def to_mongo_filter(self):
        """Convert to filter on the renter field."""
        return {"customerId": self.customer_id}


class LicensePlateSpec(Specification[Vehicle]):
    """Specification for vehicles carrying a given license plate."""

    def __init__(self, license_plate: LicensePlate):
        self.license_plate = license_plate

    def is_satisfied_by(self, vehicle: Vehicle) -> bool:
        return vehicle.license_plate == self.license_plate

    def to_mongo_filter(self):
        return {"licensePlate": self.license_plate.value}


class AvailableVehiclesSpec(VehicleStatusSpec):
    """Vehicles that can be rented right now."""

    def __init__(self):
        super().__init__(VehicleStatus.AVAILABLE)
