"""
Database Schemas

Document shapes persisted in MongoDB, defined as Pydantic models.
Each model maps to a collection:
- VehicleDocument -> "vehicles"

Documents translate to and from domain aggregates; nothing outside the
repository layer sees them.
"""

from datetime import date, datetime, time, timezone
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator

from domain.entities import Vehicle
from domain.value_objects import LicensePlate, ManufacturingDate, VehicleId, VehicleStatus


def _utc(value: Optional[datetime]) -> Optional[datetime]:
    """Attach UTC to naive datetimes returned by the driver."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class VehicleDocument(BaseModel):
    """
    Persisted vehicle
    Collection: "vehicles"
    """
    id: str = Field(..., alias="_id", description="Vehicle UUID, string primary key")
    license_plate: str = Field(..., alias="licensePlate", description="Normalised license plate")
    manufacturing_date: datetime = Field(..., alias="manufacturingDate", description="Build date at midnight UTC")
    model: str = Field(..., description="Vehicle model")
    brand: str = Field(..., description="Vehicle brand")
    status: int = Field(..., description="VehicleStatus integer value")
    customer_id: Optional[str] = Field(None, alias="customerId", description="Current renter")
    rented_at: Optional[datetime] = Field(None, alias="rentedAt", description="Rental start (UTC)")
    version: int = Field(0, ge=0, description="Optimistic-concurrency counter")

    class Config:
        populate_by_name = True

    @field_validator('manufacturing_date', 'rented_at', mode='before')
    @classmethod
    def ensure_utc(cls, v):
        if isinstance(v, datetime):
            return _utc(v)
        if isinstance(v, date):
            return datetime.combine(v, time.min, tzinfo=timezone.utc)
        return v

    @classmethod
    def from_vehicle(cls, vehicle: Vehicle) -> "VehicleDocument":
        """Build the persisted shape of a vehicle aggregate."""
        return cls(
            id=str(vehicle.id),
            license_plate=vehicle.license_plate.value,
            manufacturing_date=vehicle.manufacturing_date.value,
            model=vehicle.model,
            brand=vehicle.brand,
            status=int(vehicle.status),
            customer_id=vehicle.current_customer_id,
            rented_at=vehicle.rented_at,
            version=vehicle.version,
        )

    def to_vehicle(self) -> Vehicle:
        """Rebuild the aggregate, keeping the stored rental timestamp."""
        return Vehicle.restore(
            vehicle_id=VehicleId.from_string(self.id),
            license_plate=LicensePlate(self.license_plate),
            manufacturing_date=ManufacturingDate.restore(self.manufacturing_date),
            model=self.model,
            brand=self.brand,
            status=VehicleStatus(self.status),
            current_customer_id=self.customer_id,
            rented_at=self.rented_at,
            version=self.version,
        )

    def to_mongo(self) -> Dict[str, Any]:
        """Serialise with stored field names."""
        return self.model_dump(by_alias=True)
