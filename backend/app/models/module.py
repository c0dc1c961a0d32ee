"""Module(교육 과목) 도메인의 SQLAlchemy 모델 정의입니다."""

from sqlalchemy import Column, Integer, String, Text, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.database import Base
from app.models.trainer import trainer_module


class Module(Base):
    __tablename__ = "modules"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(150), unique=True, nullable=False)
    module_code = Column(String(50), unique=True, nullable=False)
    description = Column(Text)
    duration = Column(Integer)  # hours
    category = Column(String(50))  # BSC/BIT/B WOW ...
    created_at = Column(DateTime, server_default=func.now())

    programs = relationship("Program", secondary="program_modules", back_populates="modules")
    trainers = relationship("Trainer", secondary=trainer_module, back_populates="modules")
    sessions = relationship("TrainingSession", back_populates="module")
