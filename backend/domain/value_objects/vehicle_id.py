"""
VehicleId Value Object

Strongly-typed vehicle identifier wrapping a UUID.
"""

import uuid
from dataclasses import dataclass

from exceptions import ValidationError


@dataclass(frozen=True)
class VehicleId:
    """Immutable vehicle identifier. Never the nil UUID."""

    value: uuid.UUID

    def __post_init__(self):
        """Validate identifier."""
        if not isinstance(self.value, uuid.UUID):
            raise ValidationError("VehicleId must wrap a UUID")
        if self.value.int == 0:
            raise ValidationError("VehicleId cannot be empty")

    @classmethod
    def new(cls) -> "VehicleId":
        """Create a VehicleId with a freshly generated UUID."""
        return cls(uuid.uuid4())

    @classmethod
    def from_string(cls, value: str) -> "VehicleId":
        """
        Parse a VehicleId from its string form.

        Args:
            value: UUID string

        Returns:
            VehicleId instance

        Raises:
            ValidationError: If value is not a valid, non-empty UUID
        """
        try:
            parsed = uuid.UUID(str(value).strip())
        except ValueError:
            raise ValidationError("Invalid vehicle ID format", invalid_fields={"vehicleId": value})
        return cls(parsed)

    def __str__(self) -> str:
        return str(self.value)
