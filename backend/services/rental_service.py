"""
Rental Service

Handles the rental workflow: loads vehicles through the repository port,
checks the one-rental-per-customer rule, lets the Vehicle aggregate enforce
its own transitions, and persists the result.

The service holds no state between calls and is safe to share.
"""

import logging
from typing import List, Optional

from constants import ErrorReason
from domain.entities import Vehicle
from domain.value_objects import VehicleId
from exceptions import ConflictError, InvalidStateError, NotFoundError, ValidationError
from repositories.interfaces import IVehicleRepository
from services.interfaces import IRentalService
from utils.logging_utils import log_operation

logger = logging.getLogger(__name__)


def _require_customer_id(customer_id: Optional[str]) -> None:
    if customer_id is None or not str(customer_id).strip():
        raise ValidationError("Customer ID cannot be null or empty", invalid_fields={"customerId": customer_id})


class RentalService(IRentalService):
    """Service for vehicle rental business logic."""

    def __init__(self, vehicle_repository: IVehicleRepository):
        """
        Initialize RentalService.

        Args:
            vehicle_repository: Vehicle persistence port
        """
        if vehicle_repository is None:
            raise ValueError("vehicle_repository is required")
        self.vehicle_repo = vehicle_repository

    @log_operation("rent_vehicle")
    def rent_vehicle(self, vehicle_id: VehicleId, customer_id: str) -> Vehicle:
        _require_customer_id(customer_id)

        vehicle = self._load(vehicle_id)

        # Checked before renting so the rule holds even when the target is available
        if self.vehicle_repo.get_by_customer_id(customer_id) is not None:
            raise ConflictError(
                "Customer already has an active rental",
                reason=ErrorReason.CUSTOMER_HAS_ACTIVE_RENTAL,
                details={"customer_id": customer_id},
            )

        try:
            vehicle.rent(customer_id)
        except InvalidStateError as e:
            raise ConflictError(e.message, reason=e.reason, details=e.details)

        self.vehicle_repo.update(vehicle)
        return vehicle

    @log_operation("return_vehicle")
    def return_vehicle(self, vehicle_id: VehicleId, customer_id: str) -> Vehicle:
        _require_customer_id(customer_id)

        vehicle = self._load(vehicle_id)

        if vehicle.current_customer_id != customer_id:
            raise ConflictError(
                "Vehicle is not rented by this customer",
                reason=ErrorReason.NOT_RENTED_BY_CUSTOMER,
                details={"vehicle_id": str(vehicle_id), "customer_id": customer_id},
            )

        try:
            vehicle.return_vehicle()
        except InvalidStateError as e:
            raise ConflictError(e.message, reason=e.reason, details=e.details)

        self.vehicle_repo.update(vehicle)
        return vehicle

    def get_available_vehicles(self) -> List[Vehicle]:
        vehicles = self.vehicle_repo.get_available_vehicles()
        logger.debug(f"Found {len(vehicles)} available vehicle(s)")
        return vehicles

    def get_customer_rented_vehicle(self, customer_id: str) -> Optional[Vehicle]:
        _require_customer_id(customer_id)
        return self.vehicle_repo.get_by_customer_id(customer_id)

    def _load(self, vehicle_id: VehicleId) -> Vehicle:
        vehicle = self.vehicle_repo.get_by_id(vehicle_id)
        if vehicle is None:
            raise NotFoundError(
                "Vehicle not found",
                reason=ErrorReason.VEHICLE_NOT_FOUND,
                details={"vehicle_id": str(vehicle_id)},
            )
        return vehicle
