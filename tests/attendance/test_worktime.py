from datetime import datetime
from decimal import Decimal

from worksync.attendance.worktime import overtime_hours, shift_length_hours, standard_shift_hours, worked_hours
from worksync.settings.model import WorkingHours


def test_overtime_beyond_configured_shift():
    check_in = datetime(2024, 3, 11, 8, 30)
    check_out = datetime(2024, 3, 11, 19, 0)
    standard = standard_shift_hours(WorkingHours(check_in="09:00", check_out="18:00"))

    assert standard == Decimal(9)
    assert worked_hours(check_in, check_out) == Decimal("10.50")
    assert overtime_hours(Decimal("10.5"), standard) == Decimal("1.50")


def test_night_shift_wraps_around_midnight():
    assert shift_length_hours(WorkingHours(check_in="22:00", check_out="06:00")) == Decimal(8)


def test_half_hour_shift_boundaries():
    assert shift_length_hours(WorkingHours(check_in="08:30", check_out="17:00")) == Decimal("8.5")


def test_missing_or_empty_shift_falls_back_to_nine_hours():
    assert standard_shift_hours(None) == Decimal(9)
    assert standard_shift_hours(WorkingHours(check_in="09:00")) == Decimal(9)
    assert standard_shift_hours(WorkingHours(check_in="09:00", check_out="09:00")) == Decimal(9)


def test_no_overtime_within_shift():
    assert overtime_hours(Decimal("8.99"), Decimal(9)) == Decimal("0")
    assert overtime_hours(Decimal(9), Decimal(9)) == Decimal("0")


def test_worked_hours_rounds_to_two_places():
    # 1 minute = 0.01666.. hours
    assert worked_hours(datetime(2024, 3, 11, 9, 0), datetime(2024, 3, 11, 9, 1)) == Decimal("0.02")
