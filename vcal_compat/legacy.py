"""
vCalendar 1.0 entities.

The legacy format packs a whole timezone rule into one DAYLIGHT property and
a whole alarm into one AALARM property. These dataclasses hold the already
parsed field values of those properties.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

from .values import Duration, UtcOffset


@dataclass
class Daylight:
    """
    A DAYLIGHT property.

    When observed is False the remaining fields are left unset: the property
    only says that daylight saving time is not used.
    """
    observed: bool = False
    offset: Optional[UtcOffset] = None
    start: Optional[datetime] = None
    end: Optional[datetime] = None
    standard_name: Optional[str] = None
    daylight_name: Optional[str] = None


@dataclass
class AudioAlarm:
    """
    An AALARM property.

    The sound is given either inline (data), as a MIME content-id reference
    or as a URI. The TYPE parameter names the audio format (e.g. "WAVE").
    """
    start: Optional[datetime] = None
    snooze: Optional[Duration] = None
    repeat: Optional[int] = None
    data: Optional[bytes] = None
    content_id: Optional[str] = None
    uri: Optional[str] = None
    parameters: dict[str, Any] = field(default_factory=dict)

    @property
    def type(self) -> Optional[str]:
        """The TYPE parameter, if set."""
        return self.parameters.get('TYPE')

    @type.setter
    def type(self, value: Optional[str]):
        if value is None:
            self.parameters.pop('TYPE', None)
        else:
            self.parameters['TYPE'] = value
