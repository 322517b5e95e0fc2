"""
Vehicle Request DTOs

DTOs for vehicle-related API requests. Field names are camelCase on the wire.
"""

from datetime import date

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    class Config:
        """Pydantic configuration."""
        alias_generator = to_camel
        populate_by_name = True


class RentVehicleRequest(_CamelModel):
    """
    Request DTO for renting a vehicle.
    """

    vehicle_id: str = Field(description="Vehicle UUID")
    customer_id: str = Field(description="Customer identifier")

    class Config:
        """Pydantic configuration."""
        json_schema_extra = {
            "example": {
                "vehicleId": "3f2b8c1e-6a0d-4f59-9a43-2b1c7d8e9f10",
                "customerId": "customer-123"
            }
        }


class ReturnVehicleRequest(_CamelModel):
    """
    Request DTO for returning a vehicle.
    """

    vehicle_id: str = Field(description="Vehicle UUID")
    customer_id: str = Field(description="Customer identifier of the current renter")


class RegisterVehicleRequest(_CamelModel):
    """
    Request DTO for adding a vehicle to the fleet.

    Business validation (plate format, age window) happens in the domain.
    """

    license_plate: str = Field(description="3-10 letters and digits")
    manufacturing_date: date = Field(description="Build date, at most 5 years ago")
    model: str = Field(description="Vehicle model")
    brand: str = Field(description="Vehicle brand")


class UpdateVehicleStatusRequest(_CamelModel):
    """
    Request DTO for the administrative status override.
    """

    status: str = Field(description="Available, Maintenance or Retired")

    @field_validator("status")
    @classmethod
    def validate_status(cls, v):
        """Ensure status is not blank."""
        if not v or not v.strip():
            raise ValueError("Status cannot be empty")
        return v
