from typing import Any, Protocol


class CalendarClient(Protocol):
    def list_events(self, calendar_id: str | None, time_min: str, time_max: str) -> dict[str, Any]:
        ...


class CalendarAuthenticator(Protocol):
    def __call__(self, scopes: list[str], credentials: dict[str, Any] | None) -> CalendarClient:
        ...
