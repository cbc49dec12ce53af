"""
iCalendar entities.

The structured format spreads what the legacy format keeps in a single
property over sub-components (VTIMEZONE with DAYLIGHT/STANDARD rules, VALARM)
and over properties with their own parameters (TRIGGER, ATTACH, ATTENDEE).
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Optional

from .values import Duration, UtcOffset


class Role(Enum):
    """Participation role of an attendee."""
    CHAIR = "CHAIR"
    REQ_PARTICIPANT = "REQ-PARTICIPANT"
    OPT_PARTICIPANT = "OPT-PARTICIPANT"
    NON_PARTICIPANT = "NON-PARTICIPANT"
    ORGANIZER = "ORGANIZER"  # vCalendar 1.0 role, kept for converted organizers


class Action(Enum):
    """What an alarm does when it fires."""
    AUDIO = "AUDIO"
    DISPLAY = "DISPLAY"
    EMAIL = "EMAIL"
    PROCEDURE = "PROCEDURE"


class Related(Enum):
    """Which end of the owning component a relative trigger is measured from."""
    START = "START"
    END = "END"


@dataclass
class TimezoneRule:
    """One DAYLIGHT or STANDARD sub-component of a VTIMEZONE."""
    start: Optional[datetime] = None
    offset_from: Optional[UtcOffset] = None
    offset_to: Optional[UtcOffset] = None
    names: list[str] = field(default_factory=list)


@dataclass
class VTimezone:
    """
    A VTIMEZONE component.

    daylight_rules[i] and standard_rules[i] describe one transition pair;
    a timezone holds several pairs when its rules changed over time.
    """
    tzid: str
    daylight_rules: list[TimezoneRule] = field(default_factory=list)
    standard_rules: list[TimezoneRule] = field(default_factory=list)

    @property
    def has_rules(self) -> bool:
        return bool(self.daylight_rules or self.standard_rules)


@dataclass
class Attendee:
    """An ATTENDEE property."""
    common_name: Optional[str] = None
    email: Optional[str] = None
    uri: Optional[str] = None
    role: Optional[Role] = None
    parameters: dict[str, Any] = field(default_factory=dict)


@dataclass
class Organizer:
    """An ORGANIZER property. Organizers carry no role."""
    common_name: Optional[str] = None
    email: Optional[str] = None
    uri: Optional[str] = None
    parameters: dict[str, Any] = field(default_factory=dict)


@dataclass
class Trigger:
    """
    A TRIGGER property.

    Either absolute (date) or relative (duration, measured from the start or
    end of the owning component as given by related). A relative trigger
    without a RELATED parameter keeps related=None.
    """
    date: Optional[datetime] = None
    duration: Optional[Duration] = None
    related: Optional[Related] = None

    def __post_init__(self):
        if self.date is not None and self.duration is not None:
            raise ValueError("A trigger is either absolute or relative, not both")

    @property
    def is_absolute(self) -> bool:
        return self.date is not None


@dataclass
class Attachment:
    """An ATTACH property: inline binary data or a URI, never both."""
    content_type: Optional[str] = None
    data: Optional[bytes] = None
    uri: Optional[str] = None

    def __post_init__(self):
        if self.data is not None and self.uri is not None:
            raise ValueError("An attachment holds inline data or a URI, not both")


@dataclass
class VAlarm:
    """A VALARM component."""
    action: Optional[Action] = None
    trigger: Optional[Trigger] = None
    attachments: list[Attachment] = field(default_factory=list)
    duration: Optional[Duration] = None
    repeat: Optional[int] = None
