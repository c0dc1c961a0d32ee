"""주간 스케줄러 실행 이력 모델입니다. 초안 생성의 대상 주차를 멱등 키로 기록하고 게시 이력을 남깁니다."""

from sqlalchemy import Column, Integer, String, Date, DateTime, Index
from sqlalchemy.sql import func
from app.database import Base


class ScheduleRun(Base):
    __tablename__ = "schedule_run"

    id = Column(Integer, primary_key=True, autoincrement=True)
    action = Column(String(30), nullable=False)  # generate_draft/publish_week
    target_week_start = Column(Date, nullable=False)
    affected_count = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, server_default=func.now())

    __table_args__ = (
        Index("idx_schedule_run_week", "action", "target_week_start"),
    )
