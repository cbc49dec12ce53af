"""
Mapping between the structured entities and icalendar's object model.

The document importer/exporter works on icalendar components. These
functions turn VTIMEZONE, VALARM, ATTENDEE and ORGANIZER data into the
entities the converters take, and back.
"""

import sys
from datetime import datetime, timedelta
from typing import Optional

import pytz
from icalendar import (
    Alarm as ICalAlarm,
    Timezone as ICalTimezone,
    TimezoneDaylight as ICalTimezoneDaylight,
    TimezoneStandard as ICalTimezoneStandard,
    vBinary,
    vCalAddress,
    vUTCOffset,
)

from .config import is_debug_enabled
from .structured import (
    Action, Attachment, Attendee, Organizer, Related, Role,
    TimezoneRule, Trigger, VAlarm, VTimezone
)
from .values import Duration, UtcOffset


def _debug_print(msg: str) -> None:
    if not is_debug_enabled():
        return
    timestamp = datetime.now().strftime("%H:%M:%S")
    print(f"[{timestamp}] BRIDGE: {msg}", file=sys.stderr)


def _as_list(value) -> list:
    """Properties that occur more than once come back from icalendar as lists."""
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]


# ==================== Timezones ====================

def _rule_to_ical(rule: TimezoneRule, sub):
    if rule.start is not None:
        sub.add('DTSTART', rule.start)
    if rule.offset_from is not None:
        sub.add('TZOFFSETFROM', vUTCOffset(rule.offset_from.to_timedelta()))
    if rule.offset_to is not None:
        sub.add('TZOFFSETTO', vUTCOffset(rule.offset_to.to_timedelta()))
    for name in rule.names:
        sub.add('TZNAME', name)
    return sub


def _rule_from_ical(sub) -> TimezoneRule:
    start = sub.get('DTSTART')
    offset_from = sub.get('TZOFFSETFROM')
    offset_to = sub.get('TZOFFSETTO')
    return TimezoneRule(
        start=start.dt if start is not None else None,
        offset_from=UtcOffset.from_timedelta(offset_from.td) if offset_from is not None else None,
        offset_to=UtcOffset.from_timedelta(offset_to.td) if offset_to is not None else None,
        names=[str(name) for name in _as_list(sub.get('TZNAME'))]
    )


def timezone_to_ical(timezone: VTimezone) -> ICalTimezone:
    """Build an icalendar VTIMEZONE from a VTimezone."""
    component = ICalTimezone()
    component.add('TZID', timezone.tzid)
    for rule in timezone.daylight_rules:
        component.add_component(_rule_to_ical(rule, ICalTimezoneDaylight()))
    for rule in timezone.standard_rules:
        component.add_component(_rule_to_ical(rule, ICalTimezoneStandard()))
    return component


def timezone_from_ical(component: ICalTimezone) -> VTimezone:
    """
    Read a VTimezone from an icalendar VTIMEZONE.

    DAYLIGHT and STANDARD sub-components keep their document order.
    """
    timezone = VTimezone(str(component.get('TZID', '')))
    for sub in component.subcomponents:
        if sub.name == 'DAYLIGHT':
            timezone.daylight_rules.append(_rule_from_ical(sub))
        elif sub.name == 'STANDARD':
            timezone.standard_rules.append(_rule_from_ical(sub))
    return timezone


# ==================== Alarms ====================

def _to_utc(dt: datetime) -> datetime:
    # DATE-TIME triggers must be in UTC
    if dt.tzinfo is None:
        return pytz.UTC.localize(dt)
    return dt.astimezone(pytz.UTC)


def valarm_to_ical(valarm: VAlarm) -> ICalAlarm:
    """Build an icalendar VALARM from a VAlarm."""
    component = ICalAlarm()
    if valarm.action is not None:
        component.add('ACTION', valarm.action.value)

    trigger = valarm.trigger
    if trigger is not None:
        if trigger.is_absolute:
            component.add('TRIGGER', _to_utc(trigger.date), parameters={'VALUE': 'DATE-TIME'})
        elif trigger.duration is not None:
            params = {'RELATED': trigger.related.value} if trigger.related is not None else None
            component.add('TRIGGER', trigger.duration.to_timedelta(), parameters=params)

    for attachment in valarm.attachments:
        params = {'FMTTYPE': attachment.content_type} if attachment.content_type else {}
        if attachment.data is not None:
            component.add('ATTACH', vBinary(attachment.data, params=params))
        elif attachment.uri is not None:
            component.add('ATTACH', attachment.uri, parameters=params or None)
        else:
            _debug_print("Attachment without data or URI not written")

    if valarm.duration is not None:
        component.add('DURATION', valarm.duration.to_timedelta())
    if valarm.repeat is not None:
        component.add('REPEAT', valarm.repeat)

    return component


def _action_from_ical(value) -> Optional[Action]:
    if value is None:
        return None
    try:
        return Action(str(value).upper())
    except ValueError:
        _debug_print(f"Unknown alarm action {value!r}")
        return None


def _trigger_from_ical(prop) -> Optional[Trigger]:
    if prop is None:
        return None
    value = prop.dt
    if isinstance(value, timedelta):
        related = None
        related_value = prop.params.get('RELATED')
        if related_value:
            try:
                related = Related(str(related_value).upper())
            except ValueError:
                _debug_print(f"Unknown RELATED value {related_value!r}")
        return Trigger(duration=Duration.from_timedelta(value), related=related)
    if isinstance(value, datetime):
        return Trigger(date=value)
    _debug_print(f"Unsupported TRIGGER value {value!r}")
    return None


def _attachment_from_ical(value) -> Attachment:
    content_type = value.params.get('FMTTYPE') if hasattr(value, 'params') else None
    if isinstance(value, vBinary):
        return Attachment(content_type=content_type, data=value.bytes)
    return Attachment(content_type=content_type, uri=str(value))


def valarm_from_ical(component: ICalAlarm) -> VAlarm:
    """Read a VAlarm from an icalendar VALARM."""
    duration = component.get('DURATION')
    repeat = component.get('REPEAT')
    return VAlarm(
        action=_action_from_ical(component.get('ACTION')),
        trigger=_trigger_from_ical(component.get('TRIGGER')),
        attachments=[_attachment_from_ical(v) for v in _as_list(component.get('ATTACH'))],
        duration=Duration.from_timedelta(duration.dt) if duration is not None else None,
        repeat=int(repeat) if repeat is not None else None
    )


# ==================== Attendees / Organizers ====================

def _address_to_ical(common_name, email, uri, parameters: dict) -> vCalAddress:
    if uri:
        address = vCalAddress(uri)
        if email:
            address.params['EMAIL'] = email
    elif email:
        address = vCalAddress(f"mailto:{email}")
    else:
        raise ValueError("An address needs an email or a URI")

    for key, value in parameters.items():
        address.params[key] = value
    if common_name is not None:
        address.params['CN'] = common_name
    return address


def _address_from_ical(address: vCalAddress) -> tuple[Optional[str], Optional[str], Optional[str], dict]:
    params = dict(address.params)
    common_name = params.pop('CN', None)
    email = params.pop('EMAIL', None)
    value = str(address)
    uri = None
    if value.lower().startswith('mailto:'):
        email = value[len('mailto:'):]
    elif value:
        uri = value
    return common_name, email, uri, params


def attendee_to_ical(attendee: Attendee) -> vCalAddress:
    """Build an ATTENDEE value (address plus CN/ROLE parameters) from an Attendee."""
    address = _address_to_ical(attendee.common_name, attendee.email, attendee.uri, attendee.parameters)
    if attendee.role is not None:
        address.params['ROLE'] = attendee.role.value
    return address


def attendee_from_ical(address: vCalAddress) -> Attendee:
    """
    Read an Attendee from an ATTENDEE value.

    A ROLE this package does not know stays in the parameters.
    """
    common_name, email, uri, params = _address_from_ical(address)
    role = None
    role_value = params.get('ROLE')
    if role_value is not None:
        try:
            role = Role(str(role_value).upper())
            del params['ROLE']
        except ValueError:
            _debug_print(f"Unknown attendee role {role_value!r} kept as parameter")
    return Attendee(common_name=common_name, email=email, uri=uri, role=role, parameters=params)


def organizer_to_ical(organizer: Organizer) -> vCalAddress:
    """Build an ORGANIZER value from an Organizer."""
    return _address_to_ical(organizer.common_name, organizer.email, organizer.uri, organizer.parameters)


def organizer_from_ical(address: vCalAddress) -> Organizer:
    """Read an Organizer from an ORGANIZER value."""
    common_name, email, uri, params = _address_from_ical(address)
    return Organizer(common_name=common_name, email=email, uri=uri, parameters=params)
