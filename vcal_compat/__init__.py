"""
vCalendar 1.0 / iCalendar data model conversion.

This package converts the constructs that changed shape between the two
calendar generations:
- Value types (values.py) - UtcOffset, Duration
- Legacy entities (legacy.py) - DAYLIGHT, AALARM
- Structured entities (structured.py) - VTIMEZONE, VALARM, ATTENDEE, ORGANIZER
- Owning component view for alarm triggers (parent.py)
- Converters (timezone_converter.py, identity_converter.py,
  attachment_codec.py, alarm_converter.py) and convert() (convert.py)
- icalendar mapping (ical_bridge.py)
- Configuration (config.py)
"""

from .values import UtcOffset, Duration
from .legacy import Daylight, AudioAlarm
from .structured import (
    Role, Action, Related,
    TimezoneRule, VTimezone, Attendee, Organizer, Trigger, Attachment, VAlarm
)
from .parent import ParentComponent, SimpleParent, ICalParent
from .config import ConverterConfig, set_debug, is_debug_enabled
from .timezone_converter import daylight_to_timezone, timezone_to_daylights
from .identity_converter import attendee_to_organizer, organizer_to_attendee
from .attachment_codec import build_attachment, apply_attachment
from .alarm_converter import audio_alarm_to_valarm, valarm_to_audio_alarm, resolve_trigger_date
from .convert import convert

__all__ = [
    'UtcOffset',
    'Duration',
    'Daylight',
    'AudioAlarm',
    'Role',
    'Action',
    'Related',
    'TimezoneRule',
    'VTimezone',
    'Attendee',
    'Organizer',
    'Trigger',
    'Attachment',
    'VAlarm',
    'ParentComponent',
    'SimpleParent',
    'ICalParent',
    'ConverterConfig',
    'set_debug',
    'is_debug_enabled',
    'daylight_to_timezone',
    'timezone_to_daylights',
    'attendee_to_organizer',
    'organizer_to_attendee',
    'build_attachment',
    'apply_attachment',
    'audio_alarm_to_valarm',
    'valarm_to_audio_alarm',
    'resolve_trigger_date',
    'convert',
]
