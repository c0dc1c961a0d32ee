"""Program 도메인의 SQLAlchemy 모델 정의입니다."""

from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, Table
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.database import Base


program_module = Table(
    "program_modules",
    Base.metadata,
    Column("program_id", Integer, ForeignKey("programs.id", ondelete="CASCADE"), primary_key=True),
    Column("module_id", Integer, ForeignKey("modules.id", ondelete="CASCADE"), primary_key=True),
)


class Program(Base):
    __tablename__ = "programs"

    id = Column(Integer, primary_key=True, autoincrement=True)
    program_name = Column(String(150), unique=True, nullable=False)
    description = Column(Text)
    duration_months = Column(Integer)
    created_at = Column(DateTime, server_default=func.now())

    modules = relationship("Module", secondary=program_module, back_populates="programs")
    batches = relationship("Batch", back_populates="program")
