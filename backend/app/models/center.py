from sqlalchemy import Column, Integer, String, Text, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.database import Base


class Center(Base):
    __tablename__ = "centers"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(150), nullable=False)
    address = Column(Text)
    location_id = Column(String(50), unique=True)
    owner_name = Column(String(100))
    owner_contact = Column(String(50))
    maintenance_contact = Column(String(50))
    gps_coordinates = Column(String(100))
    created_at = Column(DateTime, server_default=func.now())

    trainers = relationship("Trainer", back_populates="center")
    batches = relationship("Batch", back_populates="center")
