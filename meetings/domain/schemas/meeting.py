from pydantic import BaseModel


class NormalizedMeeting(BaseModel):
    title: str | None = None
    link: str | None = None
    start: str
