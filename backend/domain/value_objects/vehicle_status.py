"""
VehicleStatus Value Object

Immutable representation of a vehicle's lifecycle state in the rental fleet.
"""

from enum import IntEnum

from exceptions import ValidationError


class VehicleStatus(IntEnum):
    """
    Vehicle lifecycle state.

    Persisted as its integer value and exposed over HTTP by name
    ("Available", "Rented", ...).
    """

    AVAILABLE = 0
    RENTED = 1
    MAINTENANCE = 2
    RETIRED = 3

    @property
    def label(self) -> str:
        """Display name used in API payloads."""
        return self.name.capitalize()

    def is_rentable(self) -> bool:
        """Check if a vehicle in this state can start a rental."""
        return self is VehicleStatus.AVAILABLE

    @classmethod
    def from_name(cls, value: str) -> "VehicleStatus":
        """
        Create VehicleStatus from its name (case-insensitive).

        Args:
            value: Name such as "Available" or "maintenance"

        Returns:
            VehicleStatus instance

        Raises:
            ValidationError: If value is not a known status
        """
        try:
            return cls[value.strip().upper()]
        except (KeyError, AttributeError):
            allowed = ", ".join(status.label for status in cls)
            raise ValidationError(
                f"Invalid vehicle status: {value}. Expected one of: {allowed}",
                invalid_fields={"status": value},
            )
