import pytest

from vcal_compat import (
    Action, Attendee, AudioAlarm, ConverterConfig, Daylight, Duration, Organizer,
    Related, Role, SimpleParent, Trigger, UtcOffset, VAlarm, VTimezone, convert
)


class TestConvert:
    def test_daylight_uses_configured_tzid(self, t0, t1):
        daylight = Daylight(observed=True, offset=UtcOffset(2), start=t0, end=t1)
        timezone = convert(daylight, config=ConverterConfig(timezone_id="Europe/Berlin"))
        assert isinstance(timezone, VTimezone)
        assert timezone.tzid == "Europe/Berlin"

    def test_daylight_default_tzid(self):
        assert convert(Daylight()).tzid == "TZ1"

    def test_timezone(self):
        assert convert(VTimezone("TZ1")) == []

    def test_attendee(self):
        assert isinstance(convert(Attendee(email="a@example.com")), Organizer)

    def test_organizer(self):
        assert convert(Organizer(email="a@example.com")).role is Role.ORGANIZER

    def test_audio_alarm(self, t0):
        valarm = convert(AudioAlarm(start=t0))
        assert isinstance(valarm, VAlarm)
        assert valarm.action is Action.AUDIO

    def test_valarm_with_parent(self, t0, t1):
        valarm = VAlarm(
            action=Action.AUDIO,
            trigger=Trigger(duration=Duration(prior=True, minutes=10), related=Related.END)
        )
        aalarm = convert(valarm, parent=SimpleParent(start=t0, end=t1))
        assert aalarm.start == Duration(prior=True, minutes=10).add(t1)

    def test_display_alarm(self, t0):
        assert convert(VAlarm(action=Action.DISPLAY, trigger=Trigger(date=t0))) is None

    def test_unsupported_type(self):
        with pytest.raises(TypeError):
            convert("DAYLIGHT:FALSE")
