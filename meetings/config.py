from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    CALENDAR_SERVICE_ACCOUNT: str | None = None
    CALENDAR_ID: str | None = None
    MEETINGS_HORIZON_DAYS: int = 30
    MEETINGS_OUTPUT_PATH: str = "config/meetings.json"
    LOG_LEVEL: str = "INFO"
