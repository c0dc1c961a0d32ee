"""Reports 기능 API 라우터입니다. 월 단위 세션 집계를 조회합니다."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import Optional
from app.database import get_db
from app.services import report_service
from app.middleware.auth_middleware import get_current_user
from app.models.trainer import Trainer

router = APIRouter(prefix="/api/reports", tags=["reports"])


@router.get("/dashboard-summary")
def dashboard_summary(
    year: int = Query(...),
    month: int = Query(...),
    batch_id: Optional[int] = None,
    db: Session = Depends(get_db),
    current_user: Trainer = Depends(get_current_user),
):
    return report_service.dashboard_summary(db, year, month, batch_id)


@router.get("/sessions-by-trainer-module")
def sessions_by_trainer_module(
    year: int = Query(...),
    month: int = Query(...),
    batch_id: Optional[int] = None,
    db: Session = Depends(get_db),
    current_user: Trainer = Depends(get_current_user),
):
    return report_service.sessions_by_trainer_module(db, year, month, batch_id)


@router.get("/trainer-sessions-by-location")
def trainer_sessions_by_location(
    year: int = Query(...),
    month: int = Query(...),
    batch_id: Optional[int] = None,
    db: Session = Depends(get_db),
    current_user: Trainer = Depends(get_current_user),
):
    return report_service.trainer_sessions_by_location(db, year, month, batch_id)


@router.get("/cancelled-sessions")
def cancelled_sessions(
    year: int = Query(...),
    month: int = Query(...),
    batch_id: Optional[int] = None,
    db: Session = Depends(get_db),
    current_user: Trainer = Depends(get_current_user),
):
    return report_service.sessions_with_status(db, "Cancelled", year, month, batch_id)


@router.get("/missed-lessons")
def missed_lessons(
    year: int = Query(...),
    month: int = Query(...),
    batch_id: Optional[int] = None,
    db: Session = Depends(get_db),
    current_user: Trainer = Depends(get_current_user),
):
    return report_service.sessions_with_status(db, "Missed", year, month, batch_id)


@router.get("/batch-duration")
def batch_duration(db: Session = Depends(get_db), current_user: Trainer = Depends(get_current_user)):
    return report_service.batch_duration(db)
