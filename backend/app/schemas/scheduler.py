from pydantic import BaseModel
from datetime import date


class SchedulerRunOut(BaseModel):
    message: str
    count: int
    week_start: date
    week_end: date
    skipped: bool = False
