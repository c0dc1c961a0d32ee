"""Trainer 도메인의 SQLAlchemy 모델 정의입니다. 트레이너 계정이 곧 로그인 사용자입니다."""

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Table
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.database import Base


trainer_module = Table(
    "trainer_modules",
    Base.metadata,
    Column("trainer_id", Integer, ForeignKey("trainers.id", ondelete="CASCADE"), primary_key=True),
    Column("module_id", Integer, ForeignKey("modules.id", ondelete="CASCADE"), primary_key=True),
)


class Trainer(Base):
    __tablename__ = "trainers"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    email = Column(String(150), unique=True, nullable=False)
    role = Column(String(20), nullable=False, default="trainer")  # scheduler/trainer
    status = Column(String(20), nullable=False, default="active")  # active/inactive
    center_id = Column(Integer, ForeignKey("centers.id"), nullable=True)
    created_at = Column(DateTime, server_default=func.now())

    center = relationship("Center", back_populates="trainers")
    modules = relationship("Module", secondary=trainer_module, back_populates="trainers")
    sessions = relationship("TrainingSession", back_populates="trainer")
    schedule_entries = relationship("BatchSchedule", back_populates="trainer")
