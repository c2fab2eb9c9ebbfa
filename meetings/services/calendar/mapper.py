from collections.abc import Mapping
from typing import Any

from meetings.domain.schemas.meeting import NormalizedMeeting

INVALID_STRUCTURE_MESSAGE = "Invalid data structure received from Google Calendar API"
MISSING_START_MESSAGE = "start.dateTime is missing in the event"


class MeetingsDataError(ValueError):
    """Raised when the events.list payload cannot be trusted as build output."""


def event_to_meeting(event: Any) -> NormalizedMeeting:
    start = event.get("start") if isinstance(event, Mapping) else None
    start_time = start.get("dateTime") if isinstance(start, Mapping) else None
    if not start_time:
        raise MeetingsDataError(MISSING_START_MESSAGE)
    return NormalizedMeeting(
        title=event.get("summary"),
        link=event.get("htmlLink"),
        start=start_time,
    )


def map_events(response: Any) -> list[NormalizedMeeting]:
    """Map a raw events.list response to meetings, all or nothing.

    The whole batch is rejected when ``items`` is not a list or when any
    single event lacks ``start.dateTime``; order and length are preserved.
    """
    items = response.get("items") if isinstance(response, Mapping) else None
    if not isinstance(items, list):
        raise MeetingsDataError(INVALID_STRUCTURE_MESSAGE)
    return [event_to_meeting(event) for event in items]
