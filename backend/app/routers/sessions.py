"""Sessions 기능 API 라우터입니다. 요청을 검증하고 서비스 레이어로 비즈니스 로직을 위임합니다."""

from datetime import date
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List, Optional
from app.database import get_db
from app.schemas.session import TrainingSessionCreate, TrainingSessionUpdate, TrainingSessionOut
from app.services import session_service
from app.middleware.auth_middleware import get_current_user, require_scheduler
from app.models.trainer import Trainer

router = APIRouter(prefix="/api/sessions", tags=["sessions"])


@router.get("", response_model=List[TrainingSessionOut])
def list_sessions(
    batch_id: Optional[int] = None,
    trainer_id: Optional[int] = None,
    status: Optional[str] = None,
    date_from: Optional[date] = None,
    date_to: Optional[date] = None,
    db: Session = Depends(get_db),
    current_user: Trainer = Depends(get_current_user),
):
    return session_service.list_sessions(
        db,
        batch_id=batch_id,
        trainer_id=trainer_id,
        status=status,
        date_from=date_from,
        date_to=date_to,
    )


@router.post("", response_model=TrainingSessionOut, status_code=201)
def create_session(
    data: TrainingSessionCreate,
    db: Session = Depends(get_db),
    current_user: Trainer = Depends(require_scheduler),
):
    return session_service.create_session(db, data)


@router.get("/{session_id}", response_model=TrainingSessionOut)
def get_session(session_id: int, db: Session = Depends(get_db), current_user: Trainer = Depends(get_current_user)):
    return session_service.get_session(db, session_id)


@router.put("/{session_id}", response_model=TrainingSessionOut)
def update_session(
    session_id: int,
    data: TrainingSessionUpdate,
    db: Session = Depends(get_db),
    current_user: Trainer = Depends(require_scheduler),
):
    return session_service.update_session(db, session_id, data)


@router.delete("/{session_id}")
def delete_session(
    session_id: int,
    db: Session = Depends(get_db),
    current_user: Trainer = Depends(require_scheduler),
):
    session_service.delete_session(db, session_id)
    return {"message": "삭제되었습니다."}
