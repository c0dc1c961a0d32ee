"""Batch Service 도메인 서비스 레이어입니다. 비즈니스 규칙과 데이터 접근 흐름을 캡슐화합니다."""

from typing import Optional

from sqlalchemy.orm import Session
from fastapi import HTTPException
from app.models.batch import Batch
from app.models.session import TrainingSession
from app.schemas.batch import BatchCreate, BatchUpdate

BATCH_STATUSES = ("Upcoming", "Ongoing", "Completed")


def _validate_period(start_date, end_date):
    if start_date and end_date and end_date < start_date:
        raise HTTPException(status_code=400, detail="종료일은 시작일보다 빠를 수 없습니다.")


def _validate_status(status):
    if status is not None and status not in BATCH_STATUSES:
        raise HTTPException(status_code=400, detail=f"허용되지 않은 차수 상태입니다: {status}")


def get_batches(db: Session, status: Optional[str] = None, center_id: Optional[int] = None):
    _validate_status(status)
    q = db.query(Batch)
    if status:
        q = q.filter(Batch.status == status)
    if center_id:
        q = q.filter(Batch.center_id == center_id)
    return q.order_by(Batch.start_date.desc()).all()


def get_batch(db: Session, batch_id: int) -> Batch:
    batch = db.query(Batch).filter(Batch.id == batch_id).first()
    if not batch:
        raise HTTPException(status_code=404, detail=f"차수를 찾을 수 없습니다. (id={batch_id})")
    return batch


def create_batch(db: Session, data: BatchCreate) -> Batch:
    payload = data.model_dump()
    _validate_period(payload["start_date"], payload.get("end_date"))
    _validate_status(payload.get("status"))
    batch = Batch(**payload)
    db.add(batch)
    db.commit()
    db.refresh(batch)
    return batch


def update_batch(db: Session, batch_id: int, data: BatchUpdate) -> Batch:
    batch = get_batch(db, batch_id)
    payload = data.model_dump(exclude_none=True)
    _validate_period(payload.get("start_date", batch.start_date), payload.get("end_date", batch.end_date))
    _validate_status(payload.get("status"))
    for k, v in payload.items():
        setattr(batch, k, v)
    db.commit()
    db.refresh(batch)
    return batch


def delete_batch(db: Session, batch_id: int):
    batch = get_batch(db, batch_id)
    sessions = db.query(TrainingSession).filter(TrainingSession.batch_id == batch_id).all()
    for session in sessions:
        db.delete(session)

    # 시간표 항목은 relationship cascade로 함께 삭제된다.
    db.delete(batch)
    db.commit()
