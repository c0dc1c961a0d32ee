"""차수(Batch) API 라우터입니다. 차수 일정 관리와 차수별 세션 조회를 서비스 레이어로 위임합니다."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List, Optional
from app.database import get_db
from app.schemas.batch import BatchCreate, BatchUpdate, BatchOut
from app.schemas.session import TrainingSessionOut
from app.services import batch_service, session_service
from app.middleware.auth_middleware import get_current_user, require_scheduler
from app.models.trainer import Trainer

router = APIRouter(prefix="/api/batches", tags=["batches"])


@router.get("", response_model=List[BatchOut])
def list_batches(
    status: Optional[str] = None,
    center_id: Optional[int] = None,
    db: Session = Depends(get_db),
    current_user: Trainer = Depends(get_current_user),
):
    return batch_service.get_batches(db, status=status, center_id=center_id)


@router.post("", response_model=BatchOut, status_code=201)
def create_batch(
    data: BatchCreate,
    db: Session = Depends(get_db),
    current_user: Trainer = Depends(require_scheduler),
):
    return batch_service.create_batch(db, data)


@router.get("/{batch_id}", response_model=BatchOut)
def get_batch(batch_id: int, db: Session = Depends(get_db), current_user: Trainer = Depends(get_current_user)):
    return batch_service.get_batch(db, batch_id)


@router.get("/{batch_id}/sessions", response_model=List[TrainingSessionOut])
def list_batch_sessions(
    batch_id: int,
    status: Optional[str] = None,
    db: Session = Depends(get_db),
    current_user: Trainer = Depends(get_current_user),
):
    batch = batch_service.get_batch(db, batch_id)
    return session_service.list_sessions(db, batch_id=batch.id, status=status)


@router.put("/{batch_id}", response_model=BatchOut)
def update_batch(
    batch_id: int,
    data: BatchUpdate,
    db: Session = Depends(get_db),
    current_user: Trainer = Depends(require_scheduler),
):
    return batch_service.update_batch(db, batch_id, data)


@router.delete("/{batch_id}")
def delete_batch(
    batch_id: int,
    db: Session = Depends(get_db),
    current_user: Trainer = Depends(require_scheduler),
):
    batch_service.delete_batch(db, batch_id)
    return {"message": "차수와 소속 세션, 시간표를 삭제했습니다."}
