"""
Vehicle Aggregate Root

A vehicle in the rental fleet. The entity is the only place its rental state
changes: the workflow transitions (rent, return_vehicle) are guarded, while
set_status is an explicit administrative override.
"""

from datetime import datetime, timezone
from typing import Optional

from constants import ErrorReason
from domain.value_objects import LicensePlate, ManufacturingDate, VehicleId, VehicleStatus
from exceptions import CorruptRecordError, InvalidStateError, ValidationError


def _require_text(value: Optional[str], message: str, field: str) -> None:
    if value is None or not str(value).strip():
        raise ValidationError(message, invalid_fields={field: value})


class Vehicle:
    """
    Vehicle aggregate root.

    Invariant: current_customer_id and rented_at are set if and only if
    status is RENTED.
    """

    def __init__(
        self,
        vehicle_id: VehicleId,
        license_plate: LicensePlate,
        manufacturing_date: ManufacturingDate,
        model: str,
        brand: str,
    ):
        """
        Create a new vehicle. It starts AVAILABLE with no renter.

        Raises:
            ValidationError: If model or brand is blank, or a value object is missing
        """
        _require_text(model, "Vehicle model cannot be null or empty", "model")
        _require_text(brand, "Vehicle brand cannot be null or empty", "brand")

        if vehicle_id is None:
            raise ValidationError("Vehicle id is required")
        if license_plate is None:
            raise ValidationError("License plate is required")
        if manufacturing_date is None:
            raise ValidationError("Manufacturing date is required")

        self._id = vehicle_id
        self._license_plate = license_plate
        self._manufacturing_date = manufacturing_date
        self._model = model
        self._brand = brand
        self._status = VehicleStatus.AVAILABLE
        self._current_customer_id: Optional[str] = None
        self._rented_at: Optional[datetime] = None
        self._version = 0

    @classmethod
    def restore(
        cls,
        vehicle_id: VehicleId,
        license_plate: LicensePlate,
        manufacturing_date: ManufacturingDate,
        model: str,
        brand: str,
        status: VehicleStatus,
        current_customer_id: Optional[str] = None,
        rented_at: Optional[datetime] = None,
        version: int = 0,
    ) -> "Vehicle":
        """
        Rebuild a vehicle from persisted state.

        Unlike replaying rent(), this keeps the stored rental timestamp.

        Raises:
            CorruptRecordError: If the stored rental fields contradict the status
        """
        vehicle = cls(vehicle_id, license_plate, manufacturing_date, model, brand)

        is_rented = status is VehicleStatus.RENTED
        has_renter = current_customer_id is not None and rented_at is not None
        has_any_renter_field = current_customer_id is not None or rented_at is not None
        if is_rented != has_renter or (not is_rented and has_any_renter_field):
            raise CorruptRecordError(
                str(vehicle_id),
                f"Stored vehicle {vehicle_id} has inconsistent rental fields for status {status.label}",
            )

        vehicle._status = status
        vehicle._current_customer_id = current_customer_id
        vehicle._rented_at = rented_at
        vehicle._version = version
        return vehicle

    @property
    def id(self) -> VehicleId:
        return self._id

    @property
    def license_plate(self) -> LicensePlate:
        return self._license_plate

    @property
    def manufacturing_date(self) -> ManufacturingDate:
        return self._manufacturing_date

    @property
    def model(self) -> str:
        return self._model

    @property
    def brand(self) -> str:
        return self._brand

    @property
    def status(self) -> VehicleStatus:
        return self._status

    @property
    def current_customer_id(self) -> Optional[str]:
        return self._current_customer_id

    @property
    def rented_at(self) -> Optional[datetime]:
        return self._rented_at

    @property
    def version(self) -> int:
        """Optimistic-concurrency counter maintained by the repository."""
        return self._version

    def mark_persisted(self, version: int) -> None:
        """Record the version the repository stored."""
        self._version = version

    def rent(self, customer_id: str) -> None:
        """
        Rent the vehicle to a customer.

        Args:
            customer_id: Opaque customer identifier

        Raises:
            ValidationError: If customer_id is blank
            InvalidStateError: If the vehicle is not AVAILABLE
        """
        _require_text(customer_id, "Customer ID cannot be null or empty", "customerId")

        if not self.is_available_for_rental():
            raise InvalidStateError(
                "Vehicle is not available for rental",
                reason=ErrorReason.VEHICLE_NOT_AVAILABLE,
                details={"vehicle_id": str(self._id), "status": self._status.label},
            )

        self._status = VehicleStatus.RENTED
        self._current_customer_id = customer_id
        self._rented_at = datetime.now(timezone.utc)

    def return_vehicle(self) -> None:
        """
        End the current rental.

        Raises:
            InvalidStateError: If the vehicle is not RENTED
        """
        if self._status is not VehicleStatus.RENTED:
            raise InvalidStateError(
                "Vehicle is not currently rented",
                reason=ErrorReason.VEHICLE_NOT_RENTED,
                details={"vehicle_id": str(self._id), "status": self._status.label},
            )

        self._status = VehicleStatus.AVAILABLE
        self._clear_rental()

    def set_status(self, status: VehicleStatus) -> None:
        """
        Administrative override: assign any status without transition checks.

        Rental fields are cleared whenever the new status is not RENTED.
        """
        self._status = status
        if status is not VehicleStatus.RENTED:
            self._clear_rental()

    def is_available_for_rental(self) -> bool:
        return self._status.is_rentable()

    def _clear_rental(self) -> None:
        self._current_customer_id = None
        self._rented_at = None

    def __repr__(self) -> str:
        return (
            f"Vehicle(id={self._id}, plate={self._license_plate}, "
            f"status={self._status.label}, customer={self._current_customer_id!r})"
        )
