"""
Vehicle Response DTOs

DTOs for vehicle-related API responses.
"""

from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from domain.entities import Vehicle


class VehicleResponse(BaseModel):
    """
    Response DTO for vehicle information.

    Separates the API payload from the Vehicle aggregate so the two can
    evolve independently.
    """

    id: str = Field(description="Vehicle UUID")
    license_plate: str = Field(description="Normalised license plate")
    manufacturing_date: date = Field(description="Build date")
    model: str = Field(description="Vehicle model")
    brand: str = Field(description="Vehicle brand")
    status: str = Field(description="Available, Rented, Maintenance or Retired")
    current_customer_id: Optional[str] = Field(None, description="Current renter, if rented")
    rented_at: Optional[datetime] = Field(None, description="Rental start (UTC), if rented")

    class Config:
        """Pydantic configuration."""
        alias_generator = to_camel
        populate_by_name = True

    @classmethod
    def from_entity(cls, vehicle: Vehicle) -> "VehicleResponse":
        """Map a Vehicle aggregate to its API payload."""
        return cls(
            id=str(vehicle.id),
            license_plate=vehicle.license_plate.value,
            manufacturing_date=vehicle.manufacturing_date.value,
            model=vehicle.model,
            brand=vehicle.brand,
            status=vehicle.status.label,
            current_customer_id=vehicle.current_customer_id,
            rented_at=vehicle.rented_at,
        )

    @classmethod
    def from_entities(cls, vehicles: List[Vehicle]) -> List["VehicleResponse"]:
        return [cls.from_entity(vehicle) for vehicle in vehicles]
