import sys
from pathlib import Path

# Add backend directory to Python path FIRST
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))

# Now import after path is set
from datetime import date
from typing import Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

from constants import ErrorReason
from dependencies import get_vehicle_repository
from domain.entities import Vehicle
from domain.value_objects import LicensePlate, ManufacturingDate, VehicleId, VehicleStatus
from exceptions import ConflictError
from repositories.interfaces import IVehicleRepository
from repositories.specifications import Specification
from repositories.vehicle_specifications import (
    AvailableVehiclesSpec,
    LicensePlateSpec,
    RentedByCustomerSpec,
    VehicleVersionSpec,
)
from schemas import VehicleDocument
from services.fleet_service import FleetService
from services.rental_service import RentalService


class InMemoryVehicleRepository(IVehicleRepository):
    """
    In-memory IVehicleRepository.

    Stores VehicleDocument snapshots (so callers never share aggregates with
    the store) and applies the same version check and one-renter-per-customer
    rule as the MongoDB adapter.
    """

    def __init__(self):
        self.documents: Dict[str, VehicleDocument] = {}
        self.update_calls = 0

    def _matching(self, spec: Specification[Vehicle]) -> List[Vehicle]:
        vehicles = [document.to_vehicle() for document in self.documents.values()]
        return [vehicle for vehicle in vehicles if spec.is_satisfied_by(vehicle)]

    def _first(self, spec: Specification[Vehicle]) -> Optional[Vehicle]:
        matches = self._matching(spec)
        return matches[0] if matches else None

    def get_by_id(self, vehicle_id: VehicleId) -> Optional[Vehicle]:
        document = self.documents.get(str(vehicle_id))
        return document.to_vehicle() if document else None

    def get_by_license_plate(self, license_plate: LicensePlate) -> Optional[Vehicle]:
        return self._first(LicensePlateSpec(license_plate))

    def get_by_customer_id(self, customer_id: str) -> Optional[Vehicle]:
        return self._first(RentedByCustomerSpec(customer_id))

    def get_available_vehicles(self) -> List[Vehicle]:
        return self._matching(AvailableVehiclesSpec())

    def add(self, vehicle: Vehicle) -> None:
        if self.exists_with_license_plate(vehicle.license_plate):
            raise ConflictError("duplicate plate", reason=ErrorReason.DUPLICATE_LICENSE_PLATE)
        self.documents[str(vehicle.id)] = VehicleDocument.from_vehicle(vehicle)

    def update(self, vehicle: Vehicle) -> None:
        self.update_calls += 1
        stored = self.documents.get(str(vehicle.id))
        if stored is None or not VehicleVersionSpec(vehicle.version).is_satisfied_by(stored.to_vehicle()):
            raise ConflictError("stale write", reason=ErrorReason.CONCURRENT_MODIFICATION)

        customer_id = vehicle.current_customer_id
        if customer_id is not None:
            for key, other in self.documents.items():
                if key != str(vehicle.id) and other.customer_id == customer_id:
                    raise ConflictError("renter taken", reason=ErrorReason.CUSTOMER_HAS_ACTIVE_RENTAL)

        document = VehicleDocument.from_vehicle(vehicle)
        document.version = vehicle.version + 1
        self.documents[str(vehicle.id)] = document
        vehicle.mark_persisted(document.version)

    def exists_with_license_plate(self, license_plate: LicensePlate) -> bool:
        return self._first(LicensePlateSpec(license_plate)) is not None


def build_vehicle(plate: str = "ABC1234", model: str = "Corolla", brand: str = "Toyota",
                  built: Optional[date] = None) -> Vehicle:
    """Create a valid, AVAILABLE vehicle."""
    return Vehicle(
        VehicleId.new(),
        LicensePlate(plate),
        ManufacturingDate(built or date.today()),
        model,
        brand,
    )


@pytest.fixture
def make_vehicle():
    """Factory for valid vehicles"""
    return build_vehicle


@pytest.fixture
def repository():
    """Empty in-memory vehicle repository"""
    return InMemoryVehicleRepository()


@pytest.fixture
def seed(repository):
    """Store a vehicle, optionally forcing its status, and return the stored copy"""
    counter = {"n": 0}

    def _seed(status: VehicleStatus = VehicleStatus.AVAILABLE, renter: Optional[str] = None) -> Vehicle:
        counter["n"] += 1
        vehicle = build_vehicle(plate=f"TEST{counter['n']:03d}")
        if renter is not None:
            vehicle.rent(renter)
        elif status is not VehicleStatus.AVAILABLE:
            vehicle.set_status(status)
        repository.add(vehicle)
        return repository.get_by_id(vehicle.id)

    return _seed


@pytest.fixture
def rental_service(repository):
    return RentalService(repository)


@pytest.fixture
def fleet_service(repository):
    return FleetService(repository)


@pytest.fixture
def client(repository):
    """API client wired to the in-memory repository (no MongoDB, lifespan not run)"""
    from main import app

    app.dependency_overrides[get_vehicle_repository] = lambda: repository
    yield TestClient(app)
    app.dependency_overrides.clear()
