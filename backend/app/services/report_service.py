"""Report Service 도메인 서비스 레이어입니다. 월 단위 세션 집계 리포트를 제공합니다."""

import calendar
from datetime import date, datetime, time, timedelta
from typing import Dict, List, Optional, Tuple

from fastapi import HTTPException
from sqlalchemy import func
from sqlalchemy.orm import Session, joinedload

from app.models.batch import Batch
from app.models.session import TrainingSession

ACTIVE_STATUSES = ("Draft", "Published", "Completed")
UNKNOWN = "unknown"


def month_bounds(year: int, month: int) -> Tuple[datetime, datetime]:
    if month < 1 or month > 12:
        raise HTTPException(status_code=400, detail="월은 1~12 사이여야 합니다.")
    start = datetime.combine(date(year, month, 1), time.min)
    last_day = calendar.monthrange(year, month)[1]
    return start, start + timedelta(days=last_day)


def _month_query(db: Session, year: int, month: int, batch_id: Optional[int] = None):
    start, end = month_bounds(year, month)
    q = db.query(TrainingSession).filter(
        TrainingSession.session_date >= start,
        TrainingSession.session_date < end,
    )
    if batch_id:
        q = q.filter(TrainingSession.batch_id == batch_id)
    return q


def dashboard_summary(db: Session, year: int, month: int, batch_id: Optional[int] = None) -> dict:
    rows = (
        _month_query(db, year, month, batch_id)
        .with_entities(TrainingSession.status, func.count(TrainingSession.id))
        .group_by(TrainingSession.status)
        .all()
    )
    counts = {status: count for status, count in rows}
    total = sum(counts.values())
    completed = counts.get("Completed", 0)
    return {
        "total_sessions": total,
        "completed_sessions": completed,
        "missed_sessions": counts.get("Missed", 0),
        "cancelled_sessions": counts.get("Cancelled", 0),
        "draft_sessions": counts.get("Draft", 0),
        "completion_rate": f"{completed / total * 100:.1f}" if total else "0",
    }


def sessions_by_trainer_module(db: Session, year: int, month: int, batch_id: Optional[int] = None) -> Dict[str, dict]:
    sessions = (
        _month_query(db, year, month, batch_id)
        .filter(TrainingSession.status.in_(ACTIVE_STATUSES))
        .options(joinedload(TrainingSession.trainer), joinedload(TrainingSession.module))
        .all()
    )
    report: Dict[str, dict] = {}
    for s in sessions:
        trainer_key = str(s.trainer.id) if s.trainer else UNKNOWN
        module_key = str(s.module.id) if s.module else UNKNOWN
        trainer_row = report.setdefault(trainer_key, {
            "trainer_name": s.trainer.name if s.trainer else "Unknown Trainer",
            "modules": {},
        })
        module_row = trainer_row["modules"].setdefault(module_key, {
            "module_name": s.module.name if s.module else "Unknown Module",
            "session_count": 0,
        })
        module_row["session_count"] += 1
    return report


def trainer_sessions_by_location(db: Session, year: int, month: int, batch_id: Optional[int] = None) -> Dict[str, dict]:
    sessions = (
        _month_query(db, year, month, batch_id)
        .filter(TrainingSession.status.in_(ACTIVE_STATUSES))
        .options(
            joinedload(TrainingSession.trainer),
            joinedload(TrainingSession.batch).joinedload(Batch.center),
        )
        .all()
    )
    report: Dict[str, dict] = {}
    for s in sessions:
        center = s.batch.center if s.batch else None
        trainer_key = str(s.trainer.id) if s.trainer else UNKNOWN
        center_key = str(center.id) if center else UNKNOWN
        trainer_row = report.setdefault(trainer_key, {
            "trainer_name": s.trainer.name if s.trainer else "Unknown Trainer",
            "locations": {},
        })
        location_row = trainer_row["locations"].setdefault(center_key, {
            "center_name": center.name if center else "Unknown Center",
            "address": center.address if center else None,
            "session_count": 0,
        })
        location_row["session_count"] += 1
    return report


def _session_rows(sessions: List[TrainingSession]) -> List[dict]:
    return [
        {
            "id": s.id,
            "date": s.session_date,
            "trainer": s.trainer.name if s.trainer else "Unknown",
            "batch": s.batch.batch_name if s.batch else "Unknown",
            "module": s.module.name if s.module else "Unknown",
            "notes": s.notes,
        }
        for s in sessions
    ]


def sessions_with_status(db: Session, status: str, year: int, month: int, batch_id: Optional[int] = None) -> dict:
    sessions = (
        _month_query(db, year, month, batch_id)
        .filter(TrainingSession.status == status)
        .options(
            joinedload(TrainingSession.trainer),
            joinedload(TrainingSession.batch),
            joinedload(TrainingSession.module),
        )
        .order_by(TrainingSession.session_date)
        .all()
    )
    return {"total": len(sessions), "sessions": _session_rows(sessions)}


def batch_duration(db: Session) -> List[dict]:
    batches = (
        db.query(Batch)
        .options(joinedload(Batch.sessions), joinedload(Batch.program))
        .order_by(Batch.start_date)
        .all()
    )
    report = []
    for batch in batches:
        dates = sorted(s.session_date.date() for s in batch.sessions)
        first = dates[0] if dates else None
        last = dates[-1] if dates else None
        report.append({
            "batch_id": batch.id,
            "batch_name": batch.batch_name,
            "program": batch.program.program_name if batch.program else "Unknown",
            "total_sessions": len(batch.sessions),
            "completed_sessions": sum(1 for s in batch.sessions if s.status == "Completed"),
            "start_date": first,
            "end_date": last,
            "duration_days": (last - first).days if dates else 0,
        })
    return report
