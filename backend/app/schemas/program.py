"""Program 요청/응답 계약을 위한 Pydantic 스키마입니다."""

from pydantic import BaseModel
from typing import List, Optional
from app.schemas.module import ModuleOut


class ProgramBase(BaseModel):
    program_name: str
    description: Optional[str] = None
    duration_months: Optional[int] = None


class ProgramCreate(ProgramBase):
    module_ids: List[int] = []


class ProgramUpdate(BaseModel):
    program_name: Optional[str] = None
    description: Optional[str] = None
    duration_months: Optional[int] = None
    module_ids: Optional[List[int]] = None


class ProgramOut(ProgramBase):
    id: int
    modules: List[ModuleOut] = []

    model_config = {"from_attributes": True}
