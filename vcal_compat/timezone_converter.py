"""
DAYLIGHT <-> VTIMEZONE conversion.

The legacy DAYLIGHT property records only the offset in effect during
daylight saving time and the two transition instants. The standard offset
is taken to be exactly one hour less.
"""

import sys
from datetime import datetime

from .config import DEFAULT_TIMEZONE_ID, is_debug_enabled
from .legacy import Daylight
from .structured import TimezoneRule, VTimezone


# TODO: derive the delta from the matching STANDARD rule once DAYLIGHT can carry it
DST_DELTA_HOURS = 1


def _debug_print(msg: str) -> None:
    if not is_debug_enabled():
        return
    timestamp = datetime.now().strftime("%H:%M:%S")
    print(f"[{timestamp}] TIMEZONE: {msg}", file=sys.stderr)


def daylight_to_timezone(daylight: Daylight, tzid: str = DEFAULT_TIMEZONE_ID) -> VTimezone:
    """
    Convert a DAYLIGHT property to a VTIMEZONE component.

    Args:
        daylight: The DAYLIGHT property
        tzid: TZID to give the new timezone

    Returns:
        A timezone with one DAYLIGHT and one STANDARD rule, or with no rules
        at all if daylight saving time is not observed.
    """
    timezone = VTimezone(tzid)
    if not daylight.observed:
        return timezone

    offset = daylight.offset
    standard_offset = offset.minus_hours(DST_DELTA_HOURS) if offset is not None else None

    dst = TimezoneRule(
        start=daylight.start,
        offset_from=standard_offset,
        offset_to=offset
    )
    if daylight.daylight_name is not None:
        dst.names.append(daylight.daylight_name)
    timezone.daylight_rules.append(dst)

    std = TimezoneRule(
        start=daylight.end,
        offset_from=offset,
        offset_to=standard_offset
    )
    if daylight.standard_name is not None:
        std.names.append(daylight.standard_name)
    timezone.standard_rules.append(std)

    return timezone


def timezone_to_daylights(timezone: VTimezone) -> list[Daylight]:
    """
    Convert a VTIMEZONE component to DAYLIGHT properties.

    Rules are paired by position. A missing DAYLIGHT rule means daylight
    saving time is not observed for that pair; a DAYLIGHT rule without a
    STANDARD rule is dropped.

    Args:
        timezone: The VTIMEZONE component

    Returns:
        One DAYLIGHT property per usable rule pair, in rule order.
    """
    dst_rules = timezone.daylight_rules
    std_rules = timezone.standard_rules
    daylights = []

    for i in range(max(len(dst_rules), len(std_rules))):
        dst = dst_rules[i] if i < len(dst_rules) else None
        std = std_rules[i] if i < len(std_rules) else None

        if dst is None:
            daylights.append(Daylight())
            continue

        if std is None:
            _debug_print(f"{timezone.tzid}: DAYLIGHT rule {i} has no STANDARD rule, skipped")
            continue

        daylights.append(Daylight(
            observed=True,
            offset=dst.offset_to,
            start=dst.start,
            end=std.start,
            standard_name=std.names[0] if std.names else None,
            daylight_name=dst.names[0] if dst.names else None
        ))

    return daylights
