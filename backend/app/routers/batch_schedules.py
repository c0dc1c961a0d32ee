"""Batch Schedules 기능 API 라우터입니다. 요청을 검증하고 서비스 레이어로 비즈니스 로직을 위임합니다."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.database import get_db
from app.schemas.batch_schedule import (
    BatchScheduleOut, BatchScheduleUpdate, BulkUploadRequest, CalendarEventOut, ParseCsvRequest,
)
from app.services import batch_schedule_service, batch_service
from app.middleware.auth_middleware import get_current_user, require_scheduler
from app.models.trainer import Trainer

router = APIRouter(prefix="/api/batch-schedules", tags=["batch-schedules"])


def _entries(rows):
    return [BatchScheduleOut.model_validate(row).model_dump(mode="json") for row in rows]


@router.post("/bulk-upload", status_code=201)
def bulk_upload_schedule(
    data: BulkUploadRequest,
    db: Session = Depends(get_db),
    current_user: Trainer = Depends(require_scheduler),
):
    rows = batch_schedule_service.bulk_upload_schedule(db, data.batch_id, data.schedule_data)
    return {
        "success": True,
        "message": f"{len(rows)}건의 시간표 항목을 업로드했습니다.",
        "count": len(rows),
        "data": _entries(rows),
    }


@router.post("/parse-csv")
def parse_csv_schedule(
    data: ParseCsvRequest,
    db: Session = Depends(get_db),
    current_user: Trainer = Depends(require_scheduler),
):
    parsed = batch_schedule_service.parse_csv_schedule(db, data.batch_id, data.csv_data)
    return {"success": True, "data": parsed}


@router.put("/entry/{entry_id}")
def update_schedule_entry(
    entry_id: int,
    data: BatchScheduleUpdate,
    db: Session = Depends(get_db),
    current_user: Trainer = Depends(require_scheduler),
):
    entry = batch_schedule_service.update_schedule_entry(db, entry_id, data)
    return {
        "success": True,
        "message": "시간표 항목이 수정되었습니다.",
        "data": BatchScheduleOut.model_validate(entry).model_dump(mode="json"),
    }


@router.get("/{batch_id}")
def get_batch_schedule(
    batch_id: int,
    db: Session = Depends(get_db),
    current_user: Trainer = Depends(get_current_user),
):
    batch = batch_service.get_batch(db, batch_id)
    return {"success": True, "data": _entries(batch_schedule_service.get_batch_schedule(db, batch.id))}


@router.get("/{batch_id}/monthly/{year}/{month}")
def get_monthly_view(
    batch_id: int,
    year: int,
    month: int,
    db: Session = Depends(get_db),
    current_user: Trainer = Depends(get_current_user),
):
    batch = batch_service.get_batch(db, batch_id)
    rows = batch_schedule_service.get_monthly_view(db, batch.id, year, month)
    return {"success": True, "data": _entries(rows)}


@router.get("/{batch_id}/calendar")
def get_calendar_events(
    batch_id: int,
    db: Session = Depends(get_db),
    current_user: Trainer = Depends(get_current_user),
):
    events = batch_schedule_service.build_calendar_events(db, batch_id)
    return {
        "success": True,
        "data": [CalendarEventOut(**event).model_dump(mode="json") for event in events],
    }
