"""
The owning component of an alarm, as seen by trigger resolution.

Resolving a relative trigger only needs the owner's start, end and
duration, so that is all ParentComponent exposes. ICalParent delegates to an
icalendar component rather than copying its data.
"""

from dataclasses import dataclass
from datetime import datetime, date
from typing import Optional, Protocol, Union

from icalendar import Event as ICalEvent, Journal as ICalJournal, Todo as ICalTodo

from .values import Duration


class ParentComponent(Protocol):
    """Read-only view of the component that owns an alarm."""

    @property
    def start(self) -> Optional[datetime]: ...

    @property
    def end(self) -> Optional[datetime]: ...

    @property
    def duration(self) -> Optional[Duration]: ...


@dataclass
class SimpleParent:
    """A ParentComponent built from plain values."""
    start: Optional[datetime] = None
    end: Optional[datetime] = None
    duration: Optional[Duration] = None


def _as_datetime(val) -> datetime:
    if isinstance(val, date) and not isinstance(val, datetime):
        # All-day value - midnight of that day
        return datetime.combine(val, datetime.min.time())
    return val


class ICalParent:
    """
    ParentComponent backed by an icalendar VEVENT, VTODO or VJOURNAL.

    The end is DTEND for events and DUE for todos.
    """

    def __init__(self, component: Union[ICalEvent, ICalTodo, ICalJournal]):
        self.component = component

    def _datetime(self, name: str) -> Optional[datetime]:
        prop = self.component.get(name)
        if prop is None:
            return None
        return _as_datetime(prop.dt)

    @property
    def start(self) -> Optional[datetime]:
        """The DTSTART value, if present."""
        return self._datetime('DTSTART')

    @property
    def end(self) -> Optional[datetime]:
        """The DTEND (or, for todos, DUE) value, if present."""
        name = 'DUE' if isinstance(self.component, ICalTodo) else 'DTEND'
        return self._datetime(name)

    @property
    def duration(self) -> Optional[Duration]:
        """The DURATION value, if present."""
        prop = self.component.get('DURATION')
        if prop is None:
            return None
        return Duration.from_timedelta(prop.dt)

    def __repr__(self):
        return f"ICalParent({self.component.name})"
