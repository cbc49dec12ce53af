"""
ATTENDEE <-> ORGANIZER conversion.

vCalendar 1.0 has no ORGANIZER property; the organizer is an attendee whose
ROLE is ORGANIZER.
"""

from .structured import Attendee, Organizer, Role


def attendee_to_organizer(attendee: Attendee) -> Organizer:
    """Convert an ATTENDEE property to an ORGANIZER property. The role is dropped."""
    return Organizer(
        common_name=attendee.common_name,
        email=attendee.email,
        uri=attendee.uri,
        parameters=dict(attendee.parameters)
    )


def organizer_to_attendee(organizer: Organizer) -> Attendee:
    """Convert an ORGANIZER property to an ATTENDEE property with the ORGANIZER role."""
    return Attendee(
        common_name=organizer.common_name,
        email=organizer.email,
        uri=organizer.uri,
        role=Role.ORGANIZER,
        parameters=dict(organizer.parameters)
    )
