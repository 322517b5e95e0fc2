"""
Domain Value Objects

Value objects are immutable types that represent descriptive aspects of the domain.
They have no conceptual identity and are compared by their values, not by ID.

- VehicleId: Non-empty UUID identifying a vehicle
- LicensePlate: Upper-case alphanumeric plate, 3 to 10 characters
- ManufacturingDate: Build date inside the fleet age window
- VehicleStatus: Lifecycle state (Available, Rented, Maintenance, Retired)
"""

from .license_plate import LicensePlate
from .manufacturing_date import ManufacturingDate
from .vehicle_id import VehicleId
from .vehicle_status import VehicleStatus

__all__ = [
    "LicensePlate",
    "ManufacturingDate",
    "VehicleId",
    "VehicleStatus",
]
