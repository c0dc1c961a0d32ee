from sqlalchemy import Column, Integer, String, Date, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.database import Base


class Batch(Base):
    __tablename__ = "batches"

    id = Column(Integer, primary_key=True, autoincrement=True)
    batch_name = Column(String(100), nullable=False)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date)
    status = Column(String(20), default="Upcoming")  # Upcoming/Ongoing/Completed
    program_id = Column(Integer, ForeignKey("programs.id"), nullable=True)
    center_id = Column(Integer, ForeignKey("centers.id"), nullable=True)
    created_at = Column(DateTime, server_default=func.now())

    program = relationship("Program", back_populates="batches")
    center = relationship("Center", back_populates="batches")
    sessions = relationship("TrainingSession", back_populates="batch")
    schedule_entries = relationship("BatchSchedule", back_populates="batch", cascade="all, delete-orphan")
