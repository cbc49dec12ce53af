from datetime import datetime, timedelta

import pytest

from vcal_compat import Daylight, Duration, UtcOffset, daylight_to_timezone


class TestUtcOffset:
    def test_minus_one_hour(self):
        assert UtcOffset(2, 0).minus_hours(1) == UtcOffset(1, 0)
        assert UtcOffset(-4, 0).minus_hours(1) == UtcOffset(-5, 0)

    def test_minus_one_hour_with_minutes(self):
        assert UtcOffset(5, 30).minus_hours(1) == UtcOffset(4, 30)
        assert UtcOffset(-3, -30).minus_hours(1) == UtcOffset(-4, -30)

    def test_minus_one_hour_crosses_zero(self):
        assert UtcOffset(0, 30).minus_hours(1) == UtcOffset(0, -30)

    def test_from_timedelta(self):
        assert UtcOffset.from_timedelta(timedelta(hours=-3, minutes=-30)) == UtcOffset(-3, -30)
        assert UtcOffset.from_timedelta(timedelta(minutes=45)) == UtcOffset(0, 45)

    def test_parse_and_str(self):
        assert UtcOffset.parse("-0500") == UtcOffset(-5, 0)
        assert str(UtcOffset(-5, 0)) == "-0500"
        assert str(UtcOffset(1, 0)) == "+0100"

    def test_tzinfo(self):
        dt = datetime(2024, 1, 1, 12, 0, tzinfo=UtcOffset(2, 0).tzinfo)
        assert dt.utcoffset() == timedelta(hours=2)

    def test_hour_and_minute_must_share_sign(self):
        with pytest.raises(ValueError):
            UtcOffset(-3, 30)
        with pytest.raises(ValueError):
            UtcOffset(3, -30)

    def test_minute_out_of_range(self):
        with pytest.raises(ValueError):
            UtcOffset(1, 60)
        with pytest.raises(ValueError):
            UtcOffset(0, -75)

    def test_negative_half_hour_daylight(self):
        offset = UtcOffset(-3, -30)
        assert str(offset) == "-0330"

        daylight = Daylight(
            observed=True,
            offset=offset,
            start=datetime(2024, 3, 10, 2, 0),
            end=datetime(2024, 11, 3, 2, 0)
        )
        dst = daylight_to_timezone(daylight).daylight_rules[0]
        assert dst.offset_from == UtcOffset(-4, -30)
        assert str(dst.offset_from) == "-0430"


class TestDuration:
    def test_add(self):
        start = datetime(2024, 6, 15, 9, 0)
        assert Duration(minutes=30).add(start) == datetime(2024, 6, 15, 9, 30)
        assert Duration(prior=True, minutes=10).add(start) == datetime(2024, 6, 15, 8, 50)

    def test_weeks_and_days(self):
        assert Duration(weeks=1, days=2).to_timedelta() == timedelta(days=9)

    def test_from_timedelta_normalizes(self):
        assert Duration.from_timedelta(timedelta(days=1, hours=2, seconds=5)) == \
            Duration(days=1, hours=2, seconds=5)
        assert Duration.from_timedelta(timedelta(minutes=-15)) == Duration(prior=True, minutes=15)

    def test_parse_and_str(self):
        assert Duration.parse("-PT15M") == Duration(prior=True, minutes=15)
        assert str(Duration(prior=True, minutes=15)) == "-PT15M"
        assert str(Duration(days=1)) == "P1D"
