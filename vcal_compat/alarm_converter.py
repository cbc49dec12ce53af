"""
AALARM <-> VALARM conversion.

A VALARM may trigger relative to its owner, while an AALARM always names an
absolute time. Converting a VALARM therefore needs the owning component so
the trigger can be resolved to a date (see resolve_trigger_date).

Only audio alarms are converted. DISPLAY and EMAIL alarms have no
conversion yet and come back as None, like any other alarm the legacy
format cannot hold.
"""

import sys
from datetime import datetime
from typing import Optional

from .attachment_codec import apply_attachment, build_attachment
from .config import is_debug_enabled
from .legacy import AudioAlarm
from .parent import ParentComponent, SimpleParent
from .structured import Action, Related, Trigger, VAlarm


def _debug_print(msg: str) -> None:
    if not is_debug_enabled():
        return
    timestamp = datetime.now().strftime("%H:%M:%S")
    print(f"[{timestamp}] ALARM: {msg}", file=sys.stderr)


def audio_alarm_to_valarm(aalarm: AudioAlarm) -> VAlarm:
    """
    Convert an AALARM property to a VALARM component.

    Args:
        aalarm: The AALARM property

    Returns:
        An AUDIO alarm with an absolute trigger and a single attachment.
    """
    return VAlarm(
        action=Action.AUDIO,
        trigger=Trigger(date=aalarm.start),
        attachments=[build_attachment(aalarm)],
        duration=aalarm.snooze,
        repeat=aalarm.repeat
    )


def valarm_to_audio_alarm(
    valarm: VAlarm,
    parent: Optional[ParentComponent] = None
) -> Optional[AudioAlarm]:
    """
    Convert a VALARM component to an AALARM property.

    Args:
        valarm: The VALARM component
        parent: The component that holds the VALARM

    Returns:
        The AALARM property, or None if the alarm has no action or is not
        an audio alarm.
    """
    action = valarm.action
    if action is None:
        _debug_print("VALARM without ACTION, not converted")
        return None

    if action is not Action.AUDIO:
        # DISPLAY and EMAIL alarms are not converted yet
        _debug_print(f"{action.value} alarm not converted")
        return None

    aalarm = AudioAlarm(start=resolve_trigger_date(valarm.trigger, parent))

    if valarm.attachments:
        apply_attachment(valarm.attachments[0], aalarm)
        if len(valarm.attachments) > 1:
            _debug_print(f"Ignoring {len(valarm.attachments) - 1} extra attachment(s)")

    if valarm.duration is not None:
        aalarm.snooze = valarm.duration

    if valarm.repeat is not None:
        aalarm.repeat = valarm.repeat

    return aalarm


def resolve_trigger_date(
    trigger: Optional[Trigger],
    parent: Optional[ParentComponent] = None
) -> Optional[datetime]:
    """
    Work out the absolute time a trigger fires at.

    A relative trigger is applied to the parent's start (RELATED=START) or
    end (RELATED=END). Without an explicit end, the end is taken to be the
    parent's start plus its duration. A relative trigger without RELATED
    is not resolved.

    Args:
        trigger: The TRIGGER property
        parent: The component that holds the alarm

    Returns:
        The trigger's date, or None if it cannot be determined.
    """
    if trigger is None:
        return None

    if trigger.is_absolute:
        return trigger.date

    trigger_duration = trigger.duration
    if trigger_duration is None:
        return None

    if parent is None:
        parent = SimpleParent()

    if trigger.related is Related.START:
        start = parent.start
        if start is None:
            _debug_print("RELATED=START trigger but parent has no start")
            return None
        return trigger_duration.add(start)

    if trigger.related is Related.END:
        end = parent.end
        if end is not None:
            return trigger_duration.add(end)

        start = parent.start
        duration = parent.duration
        if start is None or duration is None:
            _debug_print("RELATED=END trigger but parent has no end and no start+duration")
            return None
        return trigger_duration.add(duration.add(start))

    _debug_print("Relative trigger without RELATED parameter, date unknown")
    return None
