"""Trainer 요청/응답 계약을 위한 Pydantic 스키마입니다."""

from pydantic import BaseModel
from typing import List, Optional
from datetime import datetime


class TrainerBase(BaseModel):
    name: str
    email: str
    role: str = "trainer"
    status: str = "active"
    center_id: Optional[int] = None


class TrainerCreate(TrainerBase):
    module_ids: List[int] = []


class TrainerUpdate(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    role: Optional[str] = None
    status: Optional[str] = None
    center_id: Optional[int] = None
    module_ids: Optional[List[int]] = None


class TrainerModuleOut(BaseModel):
    id: int
    name: str
    module_code: str

    model_config = {"from_attributes": True}


class TrainerOut(TrainerBase):
    id: int
    created_at: Optional[datetime] = None
    modules: List[TrainerModuleOut] = []

    model_config = {"from_attributes": True}


class LoginRequest(BaseModel):
    email: str


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: TrainerOut
