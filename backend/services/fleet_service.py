"""
Fleet Service

Fleet administration outside the rental workflow: registering vehicles,
looking them up, and the administrative status override.
"""

import logging
from datetime import date

from constants import ErrorReason
from domain.entities import Vehicle
from domain.value_objects import LicensePlate, ManufacturingDate, VehicleId, VehicleStatus
from exceptions import ConflictError, NotFoundError, ValidationError
from repositories.interfaces import IVehicleRepository
from services.interfaces import IFleetService
from utils.logging_utils import log_operation

logger = logging.getLogger(__name__)


class FleetService(IFleetService):
    """Service for fleet administration."""

    def __init__(self, vehicle_repository: IVehicleRepository):
        if vehicle_repository is None:
            raise ValueError("vehicle_repository is required")
        self.vehicle_repo = vehicle_repository

    @log_operation("register_vehicle")
    def register_vehicle(self, license_plate: str, manufacturing_date: date, model: str, brand: str) -> Vehicle:
        plate = LicensePlate(license_plate)
        vehicle = Vehicle(
            VehicleId.new(),
            plate,
            ManufacturingDate(manufacturing_date),
            model,
            brand,
        )

        if self.vehicle_repo.exists_with_license_plate(plate):
            raise ConflictError(
                f"License plate {plate} is already registered",
                reason=ErrorReason.DUPLICATE_LICENSE_PLATE,
                details={"license_plate": plate.value},
            )

        self.vehicle_repo.add(vehicle)
        return vehicle

    def get_vehicle(self, vehicle_id: VehicleId) -> Vehicle:
        vehicle = self.vehicle_repo.get_by_id(vehicle_id)
        if vehicle is None:
            raise NotFoundError(
                "Vehicle not found",
                reason=ErrorReason.VEHICLE_NOT_FOUND,
                details={"vehicle_id": str(vehicle_id)},
            )
        return vehicle

    @log_operation("set_vehicle_status")
    def set_vehicle_status(self, vehicle_id: VehicleId, status: VehicleStatus) -> Vehicle:
        """
        Force a vehicle's status, bypassing the rental workflow.

        Moving a rented vehicle to any other status ends its rental. RENTED
        itself cannot be forced here since no renter would be recorded.
        """
        if status is VehicleStatus.RENTED:
            raise ValidationError(
                "Status Rented can only be set by renting the vehicle",
                invalid_fields={"status": status.label},
            )

        vehicle = self.get_vehicle(vehicle_id)
        previous = vehicle.status
        vehicle.set_status(status)
        self.vehicle_repo.update(vehicle)

        if previous is VehicleStatus.RENTED:
            logger.warning(f"Administrative override ended the active rental of vehicle {vehicle_id}")
        return vehicle
