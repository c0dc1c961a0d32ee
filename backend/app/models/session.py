from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, Index
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.database import Base


SESSION_STATUSES = ("Draft", "Published", "Completed", "Missed", "Cancelled")


class TrainingSession(Base):
    __tablename__ = "sessions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    session_date = Column(DateTime, nullable=False)
    status = Column(String(20), nullable=False, default="Draft")
    # Draft/Published/Completed/Missed/Cancelled
    notes = Column(Text)
    batch_id = Column(Integer, ForeignKey("batches.id"), nullable=True)
    trainer_id = Column(Integer, ForeignKey("trainers.id"), nullable=True)
    module_id = Column(Integer, ForeignKey("modules.id"), nullable=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, onupdate=func.now())

    batch = relationship("Batch", back_populates="sessions")
    trainer = relationship("Trainer", back_populates="sessions")
    module = relationship("Module", back_populates="sessions")

    __table_args__ = (
        Index("idx_session_status_date", "status", "session_date"),
        Index("idx_session_batch", "batch_id"),
    )
