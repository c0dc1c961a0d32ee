"""Session 요청/응답 계약을 위한 Pydantic 스키마입니다."""

from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class TrainingSessionCreate(BaseModel):
    # 필수 여부는 서비스에서 400으로 검증한다.
    session_date: Optional[datetime] = None
    batch_id: Optional[int] = None
    trainer_id: Optional[int] = None
    module_id: Optional[int] = None
    status: Optional[str] = None
    notes: Optional[str] = None


class TrainingSessionUpdate(BaseModel):
    session_date: Optional[datetime] = None
    batch_id: Optional[int] = None
    trainer_id: Optional[int] = None
    module_id: Optional[int] = None
    status: Optional[str] = None
    notes: Optional[str] = None


class NamedRef(BaseModel):
    id: int
    name: str

    model_config = {"from_attributes": True}


class SessionBatchRef(BaseModel):
    id: int
    batch_name: str

    model_config = {"from_attributes": True}


class TrainingSessionOut(BaseModel):
    id: int
    session_date: datetime
    status: str
    notes: Optional[str] = None
    batch_id: Optional[int] = None
    trainer_id: Optional[int] = None
    module_id: Optional[int] = None
    batch: Optional[SessionBatchRef] = None
    trainer: Optional[NamedRef] = None
    module: Optional[NamedRef] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
