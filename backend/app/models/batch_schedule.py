"""BatchSchedule(차수별 주차/일차 템플릿) 도메인의 SQLAlchemy 모델 정의입니다."""

from sqlalchemy import Column, Integer, String, Text, Date, DateTime, ForeignKey, Index
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.database import Base


class BatchSchedule(Base):
    __tablename__ = "batch_schedules"

    id = Column(Integer, primary_key=True, autoincrement=True)
    batch_id = Column(Integer, ForeignKey("batches.id", ondelete="CASCADE"), nullable=False)
    week_number = Column(Integer, nullable=False)  # 1-based
    day_number = Column(Integer, nullable=False)   # 1~6
    session_content = Column(Text)  # 여러 줄은 <br> 로 병합된 상태로 저장
    session_date = Column(Date, nullable=True)
    status = Column(String(20), default="scheduled")
    # scheduled/completed/cancelled/rescheduled
    trainer_id = Column(Integer, ForeignKey("trainers.id"), nullable=True)
    notes = Column(Text)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, onupdate=func.now())

    batch = relationship("Batch", back_populates="schedule_entries")
    trainer = relationship("Trainer", back_populates="schedule_entries")

    __table_args__ = (
        Index("idx_batch_schedule_slot", "batch_id", "week_number", "day_number"),
    )
