"""
Vehicle repository backed by MongoDB.

Writes are conditional on the stored version, and the collection carries a
unique partial index on customerId, so the one-rental-per-customer and
single-renter rules hold even when two requests race past the service-level
checks.
"""

import logging
from typing import List, Optional

from pymongo import ASCENDING
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError

from constants import Collections, ErrorReason
from domain.entities import Vehicle
from domain.value_objects import LicensePlate, VehicleId
from exceptions import ConflictError
from schemas import VehicleDocument
from .base_repository import BaseRepository
from .interfaces import IVehicleRepository
from .vehicle_specifications import (
    AvailableVehiclesSpec,
    LicensePlateSpec,
    RentedByCustomerSpec,
    VehicleByIdSpec,
    VehicleVersionSpec,
)

logger = logging.getLogger(__name__)

LICENSE_PLATE_INDEX = "licensePlate_unique"
CUSTOMER_INDEX = "customerId_active_rental_unique"


def ensure_vehicle_indexes(db: Database) -> None:
    """
    Create the indexes the vehicle repository relies on. Idempotent.

    - licensePlate: unique across the fleet
    - customerId: unique among documents where it is set (one active rental per customer)
    """
    collection = db[Collections.VEHICLES]
    collection.create_index([("licensePlate", ASCENDING)], name=LICENSE_PLATE_INDEX, unique=True)
    collection.create_index(
        [("customerId", ASCENDING)],
        name=CUSTOMER_INDEX,
        unique=True,
        partialFilterExpression={"customerId": {"$type": "string"}},
    )
    logger.info(f"Ensured indexes on '{Collections.VEHICLES}'")


def _duplicate_key_field(error: DuplicateKeyError) -> Optional[str]:
    key_pattern = (error.details or {}).get("keyPattern") or {}
    if key_pattern:
        return next(iter(key_pattern))
    message = str(error)
    if CUSTOMER_INDEX in message:
        return "customerId"
    if LICENSE_PLATE_INDEX in message:
        return "licensePlate"
    return None


class MongoVehicleRepository(BaseRepository[VehicleDocument], IVehicleRepository):
    """Repository for Vehicle aggregates."""

    def __init__(self, db: Database):
        super().__init__(db, Collections.VEHICLES, VehicleDocument)

    def get_by_id(self, vehicle_id: VehicleId) -> Optional[Vehicle]:
        document = self.find_one(VehicleByIdSpec(vehicle_id).to_mongo_filter())
        return document.to_vehicle() if document else None

    def get_by_license_plate(self, license_plate: LicensePlate) -> Optional[Vehicle]:
        document = self.find_one(LicensePlateSpec(license_plate).to_mongo_filter())
        return document.to_vehicle() if document else None

    def get_by_customer_id(self, customer_id: str) -> Optional[Vehicle]:
        document = self.find_one(RentedByCustomerSpec(customer_id).to_mongo_filter())
        return document.to_vehicle() if document else None

    def get_available_vehicles(self) -> List[Vehicle]:
        documents = self.find(AvailableVehiclesSpec().to_mongo_filter())
        return [document.to_vehicle() for document in documents]

    def add(self, vehicle: Vehicle) -> None:
        try:
            self.insert(VehicleDocument.from_vehicle(vehicle))
        except DuplicateKeyError as e:
            if _duplicate_key_field(e) == "licensePlate":
                raise ConflictError(
                    f"License plate {vehicle.license_plate} is already registered",
                    reason=ErrorReason.DUPLICATE_LICENSE_PLATE,
                )
            raise ConflictError(
                f"Vehicle {vehicle.id} already exists",
                reason=ErrorReason.CONCURRENT_MODIFICATION,
            )
        logger.info(f"Added vehicle {vehicle.id} ({vehicle.license_plate})")

    def update(self, vehicle: Vehicle) -> None:
        expected_version = vehicle.version
        document = VehicleDocument.from_vehicle(vehicle)
        document.version = expected_version + 1

        query = (VehicleByIdSpec(vehicle.id) & VehicleVersionSpec(expected_version)).to_mongo_filter()

        try:
            result = self.replace(query, document)
        except DuplicateKeyError as e:
            if _duplicate_key_field(e) == "customerId":
                raise ConflictError(
                    "Customer already has an active rental",
                    reason=ErrorReason.CUSTOMER_HAS_ACTIVE_RENTAL,
                    details={"customer_id": vehicle.current_customer_id},
                )
            raise ConflictError(
                f"Vehicle {vehicle.id} conflicts with an existing vehicle",
                reason=ErrorReason.DUPLICATE_LICENSE_PLATE,
            )

        if result.matched_count == 0:
            logger.warning(f"Stale write rejected for vehicle {vehicle.id} at version {expected_version}")
            raise ConflictError(
                "Vehicle was modified by another request",
                reason=ErrorReason.CONCURRENT_MODIFICATION,
                details={"vehicle_id": str(vehicle.id), "expected_version": expected_version},
            )

        vehicle.mark_persisted(document.version)

    def exists_with_license_plate(self, license_plate: LicensePlate) -> bool:
        return self.exists(LicensePlateSpec(license_plate).to_mongo_filter())
