"""
ManufacturingDate Value Object

Calendar date a vehicle was built, limited to the fleet age window.
"""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from constants import FleetRules
from exceptions import ValidationError


def _years_before(day: date, years: int) -> date:
    """Same calendar day `years` earlier; Feb 29 falls back to Feb 28."""
    try:
        return day.replace(year=day.year - years)
    except ValueError:
        return day.replace(year=day.year - years, day=28)


def _as_date(value) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    raise ValidationError("Manufacturing date must be a date", invalid_fields={"manufacturingDate": value})


def _check_age(value: date, today: date) -> None:
    if value > today:
        raise ValidationError(
            "Vehicle manufacturing date cannot be in the future",
            invalid_fields={"manufacturingDate": value.isoformat()},
        )

    oldest_allowed = _years_before(today, FleetRules.MAX_VEHICLE_AGE_YEARS)
    if value < oldest_allowed:
        raise ValidationError(
            f"Vehicle manufacturing date cannot be older than {FleetRules.MAX_VEHICLE_AGE_YEARS} years",
            invalid_fields={"manufacturingDate": value.isoformat()},
        )


@dataclass(frozen=True)
class ManufacturingDate:
    """
    Immutable manufacturing date.

    The age window is checked when the value is created: a date is valid if
    it is not in the future and no more than five years before today. The
    check is a snapshot; use is_valid_for_fleet() to re-evaluate it later.
    """

    value: date

    def __post_init__(self):
        """Validate manufacturing date against today's date."""
        normalized = _as_date(self.value)
        _check_age(normalized, date.today())
        object.__setattr__(self, "value", normalized)

    @classmethod
    def restore(cls, value) -> "ManufacturingDate":
        """
        Rebuild a previously validated date without re-checking its age.

        Vehicles loaded from storage keep the date they were registered with,
        even once it falls outside the age window.
        """
        instance = object.__new__(cls)
        object.__setattr__(instance, "value", _as_date(value))
        return instance

    def is_valid_for_fleet(self, today: Optional[date] = None) -> bool:
        """
        Check the age window against the current clock.

        The answer depends on when it is asked: a vehicle accepted at
        registration eventually reports False as it ages.

        Args:
            today: Reference date (defaults to date.today())

        Returns:
            True if the date is inside the fleet age window
        """
        try:
            _check_age(self.value, today or date.today())
        except ValidationError:
            return False
        return True

    def __str__(self) -> str:
        return self.value.isoformat()
