"""Batch Schedule Service 도메인 서비스 레이어입니다. 비즈니스 규칙과 데이터 접근 흐름을 캡슐화합니다."""

import calendar
import logging
from datetime import date, datetime, time
from typing import Any, List, Optional

from fastapi import HTTPException
from sqlalchemy.orm import Session

from app.config import settings
from app.database import transaction
from app.models.batch_schedule import BatchSchedule
from app.schemas.batch_schedule import BatchScheduleUpdate, ScheduleWeekIn
from app.services.batch_service import get_batch
from app.utils.schedule_csv import (
    ScheduleFormatError,
    parse_schedule_csv,
    rows_to_week_schedule,
    split_sessions,
)
from app.utils.working_days import WorkingDayCalendar

logger = logging.getLogger(__name__)

ENTRY_STATUSES = ("scheduled", "completed", "cancelled", "rescheduled")


def parse_csv_schedule(db: Session, batch_id: Optional[int], csv_data: Any) -> dict:
    if not csv_data:
        raise HTTPException(status_code=400, detail="csv_data는 필수입니다.")
    try:
        rows = parse_schedule_csv(csv_data)
        weeks = rows_to_week_schedule(rows)
    except ScheduleFormatError as exc:
        raise HTTPException(status_code=400, detail=str(exc))

    if batch_id is not None:
        batch = get_batch(db, batch_id)
        working_days = WorkingDayCalendar()
        for week in weeks:
            for day in week["days"]:
                day["date"] = working_days.project_slot(batch.start_date, week["week"], day["day"])

    logger.info("[batch-schedule] parsed %s day rows into %s weeks", len(rows), len(weeks))
    return {"rows": rows, "weeks": weeks}


def bulk_upload_schedule(db: Session, batch_id: Optional[int], schedule_data: Optional[List[ScheduleWeekIn]]) -> List[BatchSchedule]:
    if batch_id is None or schedule_data is None:
        raise HTTPException(status_code=400, detail="batch_id와 schedule_data는 필수입니다.")
    batch = get_batch(db, batch_id)
    working_days = WorkingDayCalendar()

    entries: List[BatchSchedule] = []
    for week in schedule_data:
        for day in week.days:
            content = (day.content or "").strip()
            if not content:
                continue
            if week.week < 1 or day.day < 1:
                raise HTTPException(status_code=400, detail="주차와 일차는 1 이상이어야 합니다.")
            entries.append(
                BatchSchedule(
                    batch_id=batch.id,
                    week_number=week.week,
                    day_number=day.day,
                    session_content=content,
                    session_date=day.date or working_days.project_slot(batch.start_date, week.week, day.day),
                    trainer_id=day.trainer_id,
                    status="scheduled",
                )
            )

    # 기존 시간표 삭제와 신규 입력은 하나의 트랜잭션으로 묶는다.
    with transaction(db):
        deleted = (
            db.query(BatchSchedule)
            .filter(BatchSchedule.batch_id == batch.id)
            .delete(synchronize_session=False)
        )
        db.add_all(entries)

    logger.info(
        "[batch-schedule] batch=%s replaced %s entries with %s entries",
        batch.id, deleted, len(entries),
    )
    return entries


def get_batch_schedule(db: Session, batch_id: int) -> List[BatchSchedule]:
    return (
        db.query(BatchSchedule)
        .filter(BatchSchedule.batch_id == batch_id)
        .order_by(BatchSchedule.week_number, BatchSchedule.day_number, BatchSchedule.id)
        .all()
    )


def get_monthly_view(db: Session, batch_id: int, year: int, month: int) -> List[BatchSchedule]:
    if month < 1 or month > 12:
        raise HTTPException(status_code=400, detail="월은 1~12 사이여야 합니다.")
    first = date(year, month, 1)
    last = date(year, month, calendar.monthrange(year, month)[1])
    return (
        db.query(BatchSchedule)
        .filter(
            BatchSchedule.batch_id == batch_id,
            BatchSchedule.session_date >= first,
            BatchSchedule.session_date <= last,
        )
        .order_by(BatchSchedule.session_date, BatchSchedule.day_number)
        .all()
    )


def update_schedule_entry(db: Session, entry_id: int, data: BatchScheduleUpdate) -> BatchSchedule:
    entry = db.query(BatchSchedule).filter(BatchSchedule.id == entry_id).first()
    if not entry:
        raise HTTPException(status_code=404, detail="시간표 항목을 찾을 수 없습니다.")
    payload = data.model_dump(exclude_none=True)
    if "status" in payload and payload["status"] not in ENTRY_STATUSES:
        raise HTTPException(status_code=400, detail=f"허용되지 않은 상태입니다: {payload['status']}")
    for k, v in payload.items():
        setattr(entry, k, v)
    db.commit()
    db.refresh(entry)
    return entry


def build_calendar_events(db: Session, batch_id: int) -> List[dict]:
    batch = get_batch(db, batch_id)
    working_days = WorkingDayCalendar()
    first_hour = settings.CALENDAR_FIRST_SESSION_HOUR

    events: List[dict] = []
    for entry in get_batch_schedule(db, batch.id):
        event_day = entry.session_date or working_days.project_slot(batch.start_date, entry.week_number, entry.day_number)
        shifted = working_days.was_shifted(batch.start_date, entry.week_number, entry.day_number)
        for index, title in enumerate(split_sessions(entry.session_content)):
            events.append({
                "id": f"entry-{entry.id}-{index}",
                "title": title,
                "start": datetime.combine(event_day, time(hour=min(first_hour + index, 23))),
                "entry_id": entry.id,
                "batch_id": batch.id,
                "week": entry.week_number,
                "day": entry.day_number,
                "is_shifted": shifted,
            })
    return events
