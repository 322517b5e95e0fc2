import uuid
from datetime import date, datetime, timedelta

import pytest

from constants import ErrorReason
from domain.value_objects import LicensePlate, ManufacturingDate, VehicleId, VehicleStatus
from domain.value_objects.manufacturing_date import _years_before
from exceptions import ValidationError


class TestVehicleId:
    def test_new_ids_are_unique(self):
        assert VehicleId.new() != VehicleId.new()

    def test_nil_uuid_is_rejected(self):
        with pytest.raises(ValidationError, match="cannot be empty"):
            VehicleId(uuid.UUID(int=0))

    def test_from_string_round_trips_canonical_form(self):
        raw = "3f2b8c1e-6a0d-4f59-9a43-2b1c7d8e9f10"
        assert str(VehicleId.from_string(raw)) == raw

    def test_equality_is_by_value(self):
        raw = uuid.uuid4()
        assert VehicleId(raw) == VehicleId(raw)
        assert hash(VehicleId(raw)) == hash(VehicleId(raw))

    @pytest.mark.parametrize("raw", ["", "not-a-uuid", "1234"])
    def test_malformed_string_is_rejected(self, raw):
        with pytest.raises(ValidationError) as exc_info:
            VehicleId.from_string(raw)
        assert exc_info.value.message == "Invalid vehicle ID format"
        assert exc_info.value.reason is ErrorReason.INVALID_INPUT

    def test_nil_uuid_string_is_rejected(self):
        with pytest.raises(ValidationError):
            VehicleId.from_string("00000000-0000-0000-0000-000000000000")

    def test_is_immutable(self):
        vehicle_id = VehicleId.new()
        with pytest.raises(AttributeError):
            vehicle_id.value = uuid.uuid4()


class TestLicensePlate:
    def test_is_normalised_to_upper_case(self):
        assert LicensePlate("abc1234").value == "ABC1234"

    def test_case_insensitive_equality(self):
        assert LicensePlate("abc1234") == LicensePlate("ABC1234")

    @pytest.mark.parametrize("raw", ["ABC", "ABCDEFGHIJ", "1a2"])
    def test_length_bounds_are_inclusive(self, raw):
        assert LicensePlate(raw).value == raw.upper()

    @pytest.mark.parametrize("raw", ["AB", "ABCDEFGHIJK"])
    def test_length_outside_bounds_is_rejected(self, raw):
        with pytest.raises(ValidationError, match="between 3 and 10"):
            LicensePlate(raw)

    @pytest.mark.parametrize("raw", ["ABC-123", "AB 123", "ÄBC123", "ABC123\n"])
    def test_non_alphanumeric_characters_are_rejected(self, raw):
        with pytest.raises(ValidationError, match="letters and numbers"):
            LicensePlate(raw)

    @pytest.mark.parametrize("raw", ["ßß", "ßab1", "ıab", "ﬀ1"])
    def test_non_ascii_letters_are_rejected_before_case_mapping(self, raw):
        with pytest.raises(ValidationError):
            LicensePlate(raw)

    @pytest.mark.parametrize("raw", ["", "   ", None])
    def test_blank_is_rejected(self, raw):
        with pytest.raises(ValidationError, match="cannot be null or empty"):
            LicensePlate(raw)

    def test_str_is_the_value(self):
        assert str(LicensePlate("xyz987")) == "XYZ987"


class TestManufacturingDate:
    def test_today_is_valid(self):
        assert ManufacturingDate(date.today()).value == date.today()

    def test_exactly_five_years_ago_is_valid(self):
        boundary = _years_before(date.today(), 5)
        assert ManufacturingDate(boundary).value == boundary

    def test_one_day_older_than_five_years_is_rejected(self):
        too_old = _years_before(date.today(), 5) - timedelta(days=1)
        with pytest.raises(ValidationError, match="older than 5 years"):
            ManufacturingDate(too_old)

    def test_future_date_is_rejected(self):
        with pytest.raises(ValidationError, match="future"):
            ManufacturingDate(date.today() + timedelta(days=1))

    def test_datetime_is_truncated_to_date(self):
        now = datetime.now()
        assert ManufacturingDate(now).value == now.date()

    def test_non_date_is_rejected(self):
        with pytest.raises(ValidationError):
            ManufacturingDate("2024-01-01")

    def test_leap_day_falls_back_to_february_28(self):
        assert _years_before(date(2028, 2, 29), 5) == date(2023, 2, 28)

    def test_is_valid_for_fleet_depends_on_the_reference_date(self):
        built = ManufacturingDate(date.today())
        assert built.is_valid_for_fleet()
        six_years_later = date.today() + timedelta(days=6 * 366)
        assert not built.is_valid_for_fleet(today=six_years_later)

    def test_restore_skips_the_age_window(self):
        old = date(2001, 5, 17)
        restored = ManufacturingDate.restore(old)
        assert restored.value == old
        assert not restored.is_valid_for_fleet()

    def test_str_is_iso_date(self):
        assert str(ManufacturingDate.restore(date(2024, 3, 9))) == "2024-03-09"


class TestVehicleStatus:
    def test_persisted_values(self):
        assert [int(s) for s in VehicleStatus] == [0, 1, 2, 3]

    def test_labels(self):
        assert [s.label for s in VehicleStatus] == ["Available", "Rented", "Maintenance", "Retired"]

    @pytest.mark.parametrize("raw,expected", [
        ("Available", VehicleStatus.AVAILABLE),
        ("maintenance", VehicleStatus.MAINTENANCE),
        (" RETIRED ", VehicleStatus.RETIRED),
    ])
    def test_from_name(self, raw, expected):
        assert VehicleStatus.from_name(raw) is expected

    def test_unknown_name_is_rejected(self):
        with pytest.raises(ValidationError, match="Invalid vehicle status"):
            VehicleStatus.from_name("Sold")

    def test_only_available_is_rentable(self):
        assert [s for s in VehicleStatus if s.is_rentable()] == [VehicleStatus.AVAILABLE]
