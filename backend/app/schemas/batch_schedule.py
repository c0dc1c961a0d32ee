"""BatchSchedule 요청/응답 계약을 위한 Pydantic 스키마입니다."""

from pydantic import BaseModel
from typing import Any, List, Optional, Union
import datetime as dt
from datetime import date, datetime


class ScheduleDayIn(BaseModel):
    day: int
    content: Optional[str] = None
    date: Optional[dt.date] = None
    trainer_id: Optional[int] = None


class ScheduleWeekIn(BaseModel):
    week: int
    days: List[ScheduleDayIn] = []


class BulkUploadRequest(BaseModel):
    batch_id: Optional[int] = None
    schedule_data: Optional[List[ScheduleWeekIn]] = None


class ParseCsvRequest(BaseModel):
    batch_id: Optional[int] = None
    csv_data: Optional[Union[str, List[List[Any]]]] = None


class BatchScheduleUpdate(BaseModel):
    week_number: Optional[int] = None
    day_number: Optional[int] = None
    session_content: Optional[str] = None
    session_date: Optional[date] = None
    status: Optional[str] = None
    trainer_id: Optional[int] = None
    notes: Optional[str] = None


class BatchScheduleOut(BaseModel):
    id: int
    batch_id: int
    week_number: int
    day_number: int
    session_content: Optional[str] = None
    session_date: Optional[date] = None
    status: str
    trainer_id: Optional[int] = None
    notes: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class CalendarEventOut(BaseModel):
    id: str
    title: str
    start: datetime
    entry_id: int
    batch_id: int
    week: int
    day: int
    is_shifted: bool
