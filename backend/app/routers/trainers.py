"""Trainers 기능 API 라우터입니다. 요청을 검증하고 서비스 레이어로 비즈니스 로직을 위임합니다."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List, Optional
from app.database import get_db
from app.schemas.trainer import TrainerCreate, TrainerUpdate, TrainerOut
from app.services import trainer_service
from app.middleware.auth_middleware import get_current_user, require_scheduler
from app.models.trainer import Trainer

router = APIRouter(prefix="/api/trainers", tags=["trainers"])


@router.get("", response_model=List[TrainerOut])
def list_trainers(
    role: Optional[str] = None,
    status: Optional[str] = None,
    db: Session = Depends(get_db),
    current_user: Trainer = Depends(get_current_user),
):
    return trainer_service.get_trainers(db, role=role, status=status)


@router.post("", response_model=TrainerOut, status_code=201)
def create_trainer(
    data: TrainerCreate,
    db: Session = Depends(get_db),
    current_user: Trainer = Depends(require_scheduler),
):
    return trainer_service.create_trainer(db, data)


@router.get("/{trainer_id}", response_model=TrainerOut)
def get_trainer(trainer_id: int, db: Session = Depends(get_db), current_user: Trainer = Depends(get_current_user)):
    return trainer_service.get_trainer(db, trainer_id)


@router.put("/{trainer_id}", response_model=TrainerOut)
def update_trainer(
    trainer_id: int,
    data: TrainerUpdate,
    db: Session = Depends(get_db),
    current_user: Trainer = Depends(require_scheduler),
):
    return trainer_service.update_trainer(db, trainer_id, data)


@router.delete("/{trainer_id}")
def delete_trainer(
    trainer_id: int,
    db: Session = Depends(get_db),
    current_user: Trainer = Depends(require_scheduler),
):
    trainer_service.delete_trainer(db, trainer_id)
    return {"message": "삭제되었습니다."}
