"""Trainer Service 도메인 서비스 레이어입니다. 비즈니스 규칙과 데이터 접근 흐름을 캡슐화합니다."""

from typing import List, Optional

from sqlalchemy.orm import Session
from fastapi import HTTPException
from app.models.module import Module
from app.models.trainer import Trainer
from app.schemas.trainer import TrainerCreate, TrainerUpdate
from app.utils.permissions import ALL_ROLES, ACTIVE, INACTIVE


def _validate(role: Optional[str], status: Optional[str]):
    if role is not None and role not in ALL_ROLES:
        raise HTTPException(status_code=400, detail=f"허용되지 않은 역할입니다: {role}")
    if status is not None and status not in (ACTIVE, INACTIVE):
        raise HTTPException(status_code=400, detail=f"허용되지 않은 계정 상태입니다: {status}")


def _load_modules(db: Session, module_ids: List[int]) -> List[Module]:
    if not module_ids:
        return []
    modules = db.query(Module).filter(Module.id.in_(module_ids)).all()
    missing = set(module_ids) - {m.id for m in modules}
    if missing:
        raise HTTPException(status_code=404, detail=f"과목을 찾을 수 없습니다: {sorted(missing)}")
    return modules


def get_trainers(db: Session, role: Optional[str] = None, status: Optional[str] = None):
    q = db.query(Trainer)
    if role:
        q = q.filter(Trainer.role == role)
    if status:
        q = q.filter(Trainer.status == status)
    return q.order_by(Trainer.name).all()


def get_trainer(db: Session, trainer_id: int) -> Trainer:
    trainer = db.query(Trainer).filter(Trainer.id == trainer_id).first()
    if not trainer:
        raise HTTPException(status_code=404, detail=f"트레이너를 찾을 수 없습니다. (id={trainer_id})")
    return trainer


def create_trainer(db: Session, data: TrainerCreate) -> Trainer:
    payload = data.model_dump()
    module_ids = payload.pop("module_ids", [])
    _validate(payload.get("role"), payload.get("status"))
    payload["email"] = payload["email"].strip().lower()
    trainer = Trainer(**payload)
    trainer.modules = _load_modules(db, module_ids)
    db.add(trainer)
    db.commit()
    db.refresh(trainer)
    return trainer


def update_trainer(db: Session, trainer_id: int, data: TrainerUpdate) -> Trainer:
    trainer = get_trainer(db, trainer_id)
    payload = data.model_dump(exclude_none=True)
    module_ids = payload.pop("module_ids", None)
    _validate(payload.get("role"), payload.get("status"))
    if "email" in payload:
        payload["email"] = payload["email"].strip().lower()
    for k, v in payload.items():
        setattr(trainer, k, v)
    if module_ids is not None:
        trainer.modules = _load_modules(db, module_ids)
    db.commit()
    db.refresh(trainer)
    return trainer


def delete_trainer(db: Session, trainer_id: int):
    trainer = get_trainer(db, trainer_id)
    db.delete(trainer)
    db.commit()
