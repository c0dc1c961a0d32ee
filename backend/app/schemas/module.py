"""Module 요청/응답 계약을 위한 Pydantic 스키마입니다."""

from pydantic import BaseModel
from typing import Optional


class ModuleBase(BaseModel):
    name: str
    module_code: str
    description: Optional[str] = None
    duration: Optional[int] = None
    category: Optional[str] = None


class ModuleCreate(ModuleBase):
    pass


class ModuleUpdate(BaseModel):
    name: Optional[str] = None
    module_code: Optional[str] = None
    description: Optional[str] = None
    duration: Optional[int] = None
    category: Optional[str] = None


class ModuleOut(ModuleBase):
    id: int

    model_config = {"from_attributes": True}
