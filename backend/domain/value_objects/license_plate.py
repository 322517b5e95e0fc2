"""
LicensePlate Value Object

Immutable, upper-case normalised vehicle license plate.
"""

import re
from dataclasses import dataclass

from constants import FleetRules
from exceptions import ValidationError

_PLATE_PATTERN = re.compile(r"[A-Za-z0-9]+")


@dataclass(frozen=True)
class LicensePlate:
    """
    License plate value object.

    Stored upper-cased, so "abc1234" and "ABC1234" compare equal.
    """

    value: str

    def __post_init__(self):
        """Validate and normalise the plate."""
        if self.value is None or not str(self.value).strip():
            raise ValidationError("License plate cannot be null or empty")

        raw = str(self.value)

        # validate the raw text; upper() maps "ß" to "SS"
        if not FleetRules.LICENSE_PLATE_MIN_LENGTH <= len(raw) <= FleetRules.LICENSE_PLATE_MAX_LENGTH:
            raise ValidationError(
                f"License plate must be between {FleetRules.LICENSE_PLATE_MIN_LENGTH} "
                f"and {FleetRules.LICENSE_PLATE_MAX_LENGTH} characters",
                invalid_fields={"licensePlate": self.value},
            )

        if not _PLATE_PATTERN.fullmatch(raw):
            raise ValidationError(
                "License plate can only contain letters and numbers",
                invalid_fields={"licensePlate": self.value},
            )

        # frozen dataclass: normalise through object.__setattr__
        object.__setattr__(self, "value", raw.upper())

    def __str__(self) -> str:
        return self.value
