"""
Value types shared by the converters.

Timestamps are plain datetime objects. UTC offsets and durations get their
own small immutable types because both calendar generations describe them
field by field (hour/minute, weeks/days/hours/...). Text forms are
produced and parsed through icalendar's vUTCOffset and vDuration.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta

import pytz
from icalendar import vDuration, vUTCOffset


@dataclass(frozen=True)
class UtcOffset:
    """
    A signed offset from UTC.

    Both fields carry the sign of the offset, so -03:30 is
    UtcOffset(-3, -30) and -00:30 is UtcOffset(0, -30).
    """
    hour: int
    minute: int = 0

    def __post_init__(self):
        if abs(self.minute) >= 60:
            raise ValueError(f"Offset minute must be within -59..59, got {self.minute}")
        if self.hour * self.minute < 0:
            raise ValueError(
                f"Offset hour and minute must share a sign, got {self.hour}:{self.minute}"
            )

    @classmethod
    def from_minutes(cls, total_minutes: int) -> 'UtcOffset':
        """Build an offset from a signed number of minutes."""
        sign = -1 if total_minutes < 0 else 1
        hours, minutes = divmod(abs(total_minutes), 60)
        return cls(sign * hours, sign * minutes)

    @classmethod
    def from_timedelta(cls, td: timedelta) -> 'UtcOffset':
        """Build an offset from a timedelta. Seconds are dropped."""
        return cls.from_minutes(int(td.total_seconds() / 60))

    @classmethod
    def parse(cls, text: str) -> 'UtcOffset':
        """Parse a UTC-OFFSET value such as '-0500'."""
        return cls.from_timedelta(vUTCOffset.from_ical(text))

    @property
    def total_minutes(self) -> int:
        return self.hour * 60 + self.minute

    def to_timedelta(self) -> timedelta:
        return timedelta(minutes=self.total_minutes)

    @property
    def tzinfo(self):
        """A fixed-offset pytz timezone for this offset."""
        return pytz.FixedOffset(self.total_minutes)

    def minus_hours(self, hours: int) -> 'UtcOffset':
        """Return this offset moved back by a whole number of hours."""
        return UtcOffset.from_minutes(self.total_minutes - hours * 60)

    def __str__(self):
        return vUTCOffset(self.to_timedelta()).to_ical()


@dataclass(frozen=True)
class Duration:
    """
    A signed span of time, kept in the components it was written with.

    'prior' marks a negative duration (the leading '-' in '-PT15M').
    """
    prior: bool = False
    weeks: int = 0
    days: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: int = 0

    @classmethod
    def from_timedelta(cls, td: timedelta) -> 'Duration':
        """Build a normalized duration (days/hours/minutes/seconds)."""
        prior = td < timedelta(0)
        if prior:
            td = -td
        days, rest = divmod(int(td.total_seconds()), 86400)
        hours, rest = divmod(rest, 3600)
        minutes, seconds = divmod(rest, 60)
        return cls(prior=prior, days=days, hours=hours, minutes=minutes, seconds=seconds)

    @classmethod
    def parse(cls, text: str) -> 'Duration':
        """Parse an iCalendar duration such as '-PT15M'."""
        return cls.from_timedelta(vDuration.from_ical(text))

    def to_timedelta(self) -> timedelta:
        td = timedelta(
            weeks=self.weeks,
            days=self.days,
            hours=self.hours,
            minutes=self.minutes,
            seconds=self.seconds
        )
        return -td if self.prior else td

    def add(self, date: datetime) -> datetime:
        """
        Apply this duration to a timestamp.

        Args:
            date: The timestamp to start from.

        Returns:
            The timestamp moved forward (or backward, if prior) by this duration.
        """
        return date + self.to_timedelta()

    def __str__(self):
        return vDuration(self.to_timedelta()).to_ical().decode('utf-8')
