"""
Single entry point for the document importer/exporter.

convert() picks the conversion from the type of the entity it is given.
"""

from typing import Optional, Union

from .alarm_converter import audio_alarm_to_valarm, valarm_to_audio_alarm
from .config import ConverterConfig
from .identity_converter import attendee_to_organizer, organizer_to_attendee
from .legacy import AudioAlarm, Daylight
from .parent import ParentComponent
from .structured import Attendee, Organizer, VAlarm, VTimezone
from .timezone_converter import daylight_to_timezone, timezone_to_daylights


Convertible = Union[Daylight, VTimezone, Attendee, Organizer, AudioAlarm, VAlarm]


def convert(
    entity: Convertible,
    parent: Optional[ParentComponent] = None,
    config: Optional[ConverterConfig] = None
):
    """
    Convert an entity to its counterpart in the other calendar generation.

    Args:
        entity: DAYLIGHT, VTIMEZONE, ATTENDEE, ORGANIZER, AALARM or VALARM
        parent: Owning component, used only for VALARM triggers
        config: Converter settings (default: ConverterConfig())

    Returns:
        VTimezone for a Daylight, a list of Daylight for a VTimezone,
        Organizer for an Attendee, Attendee for an Organizer, VAlarm for an
        AudioAlarm, and an AudioAlarm or None for a VAlarm.

    Raises:
        TypeError: If the entity has no conversion.
    """
    if config is None:
        config = ConverterConfig()

    if isinstance(entity, Daylight):
        return daylight_to_timezone(entity, tzid=config.timezone_id)
    if isinstance(entity, VTimezone):
        return timezone_to_daylights(entity)
    if isinstance(entity, Attendee):
        return attendee_to_organizer(entity)
    if isinstance(entity, Organizer):
        return organizer_to_attendee(entity)
    if isinstance(entity, AudioAlarm):
        return audio_alarm_to_valarm(entity)
    if isinstance(entity, VAlarm):
        return valarm_to_audio_alarm(entity, parent)

    raise TypeError(f"No conversion for {type(entity).__name__}")
