import logging
from datetime import datetime, timedelta
from typing import Any

import google.auth
from google.oauth2 import service_account
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from meetings.services.calendar.base import CalendarClient

logger = logging.getLogger(__name__)

SCOPES = ["https://www.googleapis.com/auth/calendar"]


class GoogleCalendarClient(CalendarClient):
    def __init__(self, service) -> None:
        self.service = service

    def list_events(self, calendar_id: str | None, time_min: str, time_max: str) -> dict[str, Any]:
        """Single events.list call; raises HttpError on API rejection."""
        try:
            return (
                self.service.events()
                .list(calendarId=calendar_id, timeMin=time_min, timeMax=time_max)
                .execute()
            )
        except HttpError as exc:
            logger.error(
                "Google Calendar list failed for calendar=%s: %s",
                calendar_id,
                exc,
                exc_info=logger.isEnabledFor(logging.DEBUG),
            )
            raise


def authenticate(scopes: list[str], credentials: dict[str, Any] | None) -> GoogleCalendarClient:
    if credentials is None:
        # Application default credentials; raises DefaultCredentialsError when none are available.
        creds, _ = google.auth.default(scopes=scopes)
    else:
        creds = service_account.Credentials.from_service_account_info(credentials, scopes=scopes)
    service = build("calendar", "v3", credentials=creds, cache_discovery=False)
    return GoogleCalendarClient(service=service)


def build_fetch_window(now: datetime, horizon_days: int) -> tuple[str, str]:
    if now.tzinfo is None or now.utcoffset() is None:
        # timeMin/timeMax must be RFC 3339 with an offset.
        raise ValueError(f"Fetch window start must be timezone-aware, got {now.isoformat()}")
    if horizon_days <= 0:
        raise ValueError(f"Fetch horizon must be positive, got {horizon_days} days")
    end = now + timedelta(days=horizon_days)
    return now.isoformat(), end.isoformat()
