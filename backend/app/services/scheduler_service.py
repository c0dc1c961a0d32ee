"""주간 초안 생성/게시(Draft → Published) 스케줄러 서비스 레이어입니다.

현재 ISO 주(월~일)의 게시 세션을 템플릿으로 다음 주 초안을 만들고, 다음 ISO 주의
초안을 일괄 게시한다. 두 작업 모두 하나의 트랜잭션으로 실행된다.
"""

import logging
from datetime import date, datetime, time, timedelta
from typing import Optional, Tuple

from sqlalchemy.orm import Session

from app.config import settings
from app.database import transaction
from app.models.schedule_run import ScheduleRun
from app.models.session import TrainingSession

logger = logging.getLogger(__name__)

DRAFT = "Draft"
PUBLISHED = "Published"

GENERATE_DRAFT = "generate_draft"
PUBLISH_WEEK = "publish_week"


def iso_week_bounds(day: date) -> Tuple[datetime, datetime]:
    """``day`` 가 속한 ISO 주의 [월요일 00:00, 다음 월요일 00:00) 구간."""
    monday = day - timedelta(days=day.weekday())
    start = datetime.combine(monday, time.min)
    return start, start + timedelta(days=7)


def _result(message: str, count: int, week_start: datetime, skipped: bool = False) -> dict:
    return {
        "message": message,
        "count": count,
        "week_start": week_start.date(),
        "week_end": (week_start + timedelta(days=6)).date(),
        "skipped": skipped,
    }


def _already_generated(db: Session, target_week_start: date) -> bool:
    return (
        db.query(ScheduleRun)
        .filter(
            ScheduleRun.action == GENERATE_DRAFT,
            ScheduleRun.target_week_start == target_week_start,
            ScheduleRun.affected_count > 0,
        )
        .first()
        is not None
    )


def generate_draft(db: Session, today: Optional[date] = None) -> dict:
    today = today or date.today()
    week_start, week_end = iso_week_bounds(today)
    target_start = week_start + timedelta(days=7)

    if settings.DRAFT_GENERATION_IDEMPOTENT and _already_generated(db, target_start.date()):
        logger.info("[scheduler] draft for week %s already generated; skipping", target_start.date())
        return _result("대상 주차의 초안이 이미 생성되어 있습니다.", 0, target_start, skipped=True)

    templates = (
        db.query(TrainingSession)
        .filter(
            TrainingSession.status == PUBLISHED,
            TrainingSession.session_date >= week_start,
            TrainingSession.session_date < week_end,
        )
        .order_by(TrainingSession.session_date, TrainingSession.id)
        .all()
    )
    if not templates:
        logger.info("[scheduler] no published sessions in week %s; nothing to copy", week_start.date())
        return _result("현재 주에 템플릿으로 사용할 게시 세션이 없습니다.", 0, target_start)

    drafts = [
        TrainingSession(
            batch_id=row.batch_id,
            trainer_id=row.trainer_id,
            module_id=row.module_id,
            session_date=row.session_date + timedelta(days=7),
            status=DRAFT,
        )
        for row in templates
    ]
    with transaction(db):
        db.add_all(drafts)
        db.add(ScheduleRun(action=GENERATE_DRAFT, target_week_start=target_start.date(), affected_count=len(drafts)))

    logger.info("[scheduler] generated %s draft sessions for week %s", len(drafts), target_start.date())
    return _result(f"다음 주 초안 세션 {len(drafts)}건을 생성했습니다.", len(drafts), target_start)


def publish_week(db: Session, today: Optional[date] = None) -> dict:
    today = today or date.today()
    week_start, week_end = iso_week_bounds(today + timedelta(days=7))

    with transaction(db):
        count = (
            db.query(TrainingSession)
            .filter(
                TrainingSession.status == DRAFT,
                TrainingSession.session_date >= week_start,
                TrainingSession.session_date < week_end,
            )
            .update({TrainingSession.status: PUBLISHED}, synchronize_session=False)
        )
        # 게시 이력은 감사 기록으로만 남기며 멱등성 판단에는 쓰지 않는다.
        if count:
            db.add(ScheduleRun(action=PUBLISH_WEEK, target_week_start=week_start.date(), affected_count=count))

    if count == 0:
        logger.info("[scheduler] no draft sessions to publish in week %s", week_start.date())
        return _result("다음 주에 게시할 초안 세션이 없습니다.", 0, week_start)

    logger.info("[scheduler] published %s sessions for week %s", count, week_start.date())
    return _result(f"{count}건의 세션을 게시했습니다.", count, week_start)
