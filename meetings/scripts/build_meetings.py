from __future__ import annotations

import argparse
from datetime import datetime, timezone
import logging
from pathlib import Path
from typing import Callable

from meetings.config import Settings
from meetings.core.env import load_env
from meetings.domain.schemas.meeting import NormalizedMeeting
from meetings.logging import configure_logging
from meetings.services.calendar.base import CalendarAuthenticator
from meetings.services.calendar.credentials import load_credentials
from meetings.services.calendar.google_calendar_service import (
    SCOPES,
    authenticate,
    build_fetch_window,
)
from meetings.services.calendar.mapper import map_events
from meetings.services.export.write_meetings import write_meetings

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(tz=timezone.utc)


def build_meetings(
    output_path: str | Path,
    settings: Settings | None = None,
    authenticator: CalendarAuthenticator = authenticate,
    clock: Callable[[], datetime] | None = None,
) -> list[NormalizedMeeting]:
    """Fetch upcoming events, validate them and write the meetings artifact.

    Stages run in order (load, fetch, transform, write) and the first failure
    propagates to the caller; nothing is written unless every event is valid.
    """
    if settings is None:
        settings = Settings()
    now = (clock or _utc_now)()

    credentials = load_credentials(settings)
    time_min, time_max = build_fetch_window(now, settings.MEETINGS_HORIZON_DAYS)

    client = authenticator(SCOPES, credentials)
    logger.info("Fetching events for calendar=%s from %s to %s", settings.CALENDAR_ID, time_min, time_max)
    response = client.list_events(settings.CALENDAR_ID, time_min, time_max)

    meetings = map_events(response)
    logger.info("Fetched %d events", len(meetings))

    write_meetings(meetings, output_path)
    return meetings


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Fetch upcoming calendar events into a meetings JSON file.")
    parser.add_argument("--output", default=None, help="Path of the JSON file to write (parent must exist)")
    parser.add_argument("--horizon-days", type=int, default=None, help="Days ahead of now to include")
    args = parser.parse_args(argv)

    load_env()
    settings = Settings()
    configure_logging(settings.LOG_LEVEL)
    if args.horizon_days is not None:
        settings.MEETINGS_HORIZON_DAYS = args.horizon_days
    output_path = args.output or settings.MEETINGS_OUTPUT_PATH

    meetings = build_meetings(output_path, settings=settings)
    print(f"Wrote {len(meetings)} meetings to {output_path}")


if __name__ == "__main__":
    main()
