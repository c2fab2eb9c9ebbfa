import json
from typing import Any

from meetings.config import Settings


def load_credentials(settings: Settings) -> dict[str, Any] | None:
    """Parse the service-account JSON from settings; None when it is not configured."""
    raw = settings.CALENDAR_SERVICE_ACCOUNT
    if not raw:
        return None
    return json.loads(raw)
