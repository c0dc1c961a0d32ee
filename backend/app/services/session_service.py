"""Session Service 도메인 서비스 레이어입니다. 비즈니스 규칙과 데이터 접근 흐름을 캡슐화합니다."""

from datetime import date, datetime, time, timedelta
from typing import Optional

from sqlalchemy.orm import Session, joinedload
from fastapi import HTTPException
from app.models.batch import Batch
from app.models.module import Module
from app.models.session import SESSION_STATUSES, TrainingSession
from app.models.trainer import Trainer
from app.schemas.session import TrainingSessionCreate, TrainingSessionUpdate


def _base_query(db: Session):
    return db.query(TrainingSession).options(
        joinedload(TrainingSession.batch),
        joinedload(TrainingSession.trainer),
        joinedload(TrainingSession.module),
    )


def _validate_status(status: Optional[str]):
    if status is not None and status not in SESSION_STATUSES:
        raise HTTPException(status_code=400, detail=f"허용되지 않은 세션 상태입니다: {status}")


def _ensure_refs(db: Session, payload: dict):
    refs = (("batch_id", Batch, "차수"), ("trainer_id", Trainer, "트레이너"), ("module_id", Module, "과목"))
    for key, model, label in refs:
        ref_id = payload.get(key)
        if ref_id is not None and db.query(model).filter(model.id == ref_id).first() is None:
            raise HTTPException(status_code=404, detail=f"{label}를 찾을 수 없습니다. (id={ref_id})")


def list_sessions(
    db: Session,
    batch_id: Optional[int] = None,
    trainer_id: Optional[int] = None,
    status: Optional[str] = None,
    date_from: Optional[date] = None,
    date_to: Optional[date] = None,
):
    q = _base_query(db)
    if batch_id:
        q = q.filter(TrainingSession.batch_id == batch_id)
    if trainer_id:
        q = q.filter(TrainingSession.trainer_id == trainer_id)
    if status:
        q = q.filter(TrainingSession.status == status)
    if date_from:
        q = q.filter(TrainingSession.session_date >= datetime.combine(date_from, time.min))
    if date_to:
        q = q.filter(TrainingSession.session_date < datetime.combine(date_to + timedelta(days=1), time.min))
    return q.order_by(TrainingSession.session_date, TrainingSession.id).all()


def get_session(db: Session, session_id: int) -> TrainingSession:
    session = _base_query(db).filter(TrainingSession.id == session_id).first()
    if not session:
        raise HTTPException(status_code=404, detail=f"세션을 찾을 수 없습니다. (id={session_id})")
    return session


def create_session(db: Session, data: TrainingSessionCreate) -> TrainingSession:
    payload = data.model_dump()
    required = ("session_date", "batch_id", "trainer_id", "module_id")
    if any(payload.get(key) is None for key in required):
        raise HTTPException(status_code=400, detail="세션 일시, 트레이너, 차수, 과목은 필수입니다.")
    payload["status"] = payload.get("status") or "Draft"
    _validate_status(payload["status"])
    _ensure_refs(db, payload)
    session = TrainingSession(**payload)
    db.add(session)
    db.commit()
    return get_session(db, session.id)


def update_session(db: Session, session_id: int, data: TrainingSessionUpdate) -> TrainingSession:
    session = get_session(db, session_id)
    payload = data.model_dump(exclude_none=True)
    _validate_status(payload.get("status"))
    _ensure_refs(db, payload)
    for k, v in payload.items():
        setattr(session, k, v)
    db.commit()
    return get_session(db, session_id)


def delete_session(db: Session, session_id: int):
    session = get_session(db, session_id)
    db.delete(session)
    db.commit()
