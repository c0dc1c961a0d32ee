"""Modules 기능 API 라우터입니다."""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from typing import List
from app.database import get_db
from app.schemas.module import ModuleCreate, ModuleUpdate, ModuleOut
from app.models.module import Module
from app.middleware.auth_middleware import get_current_user, require_scheduler
from app.models.trainer import Trainer

router = APIRouter(prefix="/api/modules", tags=["modules"])


def _get_module(db: Session, module_id: int) -> Module:
    m = db.query(Module).filter(Module.id == module_id).first()
    if not m:
        raise HTTPException(status_code=404, detail="과목을 찾을 수 없습니다.")
    return m


@router.get("", response_model=List[ModuleOut])
def list_modules(
    category: str = None,
    db: Session = Depends(get_db),
    current_user: Trainer = Depends(get_current_user),
):
    q = db.query(Module)
    if category:
        q = q.filter(Module.category == category)
    return q.order_by(Module.name).all()


@router.post("", response_model=ModuleOut, status_code=201)
def create_module(
    data: ModuleCreate,
    db: Session = Depends(get_db),
    current_user: Trainer = Depends(require_scheduler),
):
    m = Module(**data.model_dump())
    db.add(m)
    db.commit()
    db.refresh(m)
    return m


@router.put("/{module_id}", response_model=ModuleOut)
def update_module(
    module_id: int,
    data: ModuleUpdate,
    db: Session = Depends(get_db),
    current_user: Trainer = Depends(require_scheduler),
):
    m = _get_module(db, module_id)
    for k, v in data.model_dump(exclude_none=True).items():
        setattr(m, k, v)
    db.commit()
    db.refresh(m)
    return m


@router.delete("/{module_id}")
def delete_module(
    module_id: int,
    db: Session = Depends(get_db),
    current_user: Trainer = Depends(require_scheduler),
):
    m = _get_module(db, module_id)
    db.delete(m)
    db.commit()
    return {"message": "삭제되었습니다."}
