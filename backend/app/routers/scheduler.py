"""주간 초안 생성/게시 API 라우터입니다."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.database import get_db
from app.schemas.scheduler import SchedulerRunOut
from app.services import scheduler_service
from app.middleware.auth_middleware import require_scheduler
from app.models.trainer import Trainer

router = APIRouter(prefix="/api/scheduler", tags=["scheduler"])


@router.post("/generate-draft", response_model=SchedulerRunOut)
def generate_draft(
    db: Session = Depends(get_db),
    current_user: Trainer = Depends(require_scheduler),
):
    return scheduler_service.generate_draft(db)


@router.post("/publish-week", response_model=SchedulerRunOut)
def publish_week(
    db: Session = Depends(get_db),
    current_user: Trainer = Depends(require_scheduler),
):
    return scheduler_service.publish_week(db)
