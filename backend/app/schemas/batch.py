"""Batch 요청/응답 계약을 위한 Pydantic 스키마입니다."""

from pydantic import BaseModel
from typing import Optional
from datetime import date, datetime


class BatchBase(BaseModel):
    batch_name: str
    start_date: date
    end_date: Optional[date] = None
    status: str = "Upcoming"
    program_id: Optional[int] = None
    center_id: Optional[int] = None


class BatchCreate(BatchBase):
    pass


class BatchUpdate(BaseModel):
    batch_name: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    status: Optional[str] = None
    program_id: Optional[int] = None
    center_id: Optional[int] = None


class BatchOut(BatchBase):
    id: int
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
