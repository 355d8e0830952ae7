import uuid
from datetime import datetime

from sqlalchemy import Column, DateTime, Index, Integer, String
from schoolhub.database import Base


def _new_id():
    return str(uuid.uuid4())


class TimeSlot(Base):
    __tablename__ = "time_slots"

    id = Column(String(36), primary_key=True, default=_new_id)

    # "HH:MM", but rows written elsewhere are not guaranteed to be clean
    start_time = Column(String(8), nullable=False)
    end_time = Column(String(8), nullable=False)
    duration = Column(Integer)  # minutes

    day_of_week = Column(String(10), nullable=False)

    subject_id = Column(String(36), nullable=False)
    teacher_id = Column(String(36), nullable=False)
    class_id = Column(String(36), nullable=False)
    section_id = Column(String(36), nullable=False)
    academic_year_id = Column(String(36), nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    __table_args__ = (
        Index("ix_time_slots_section_day", "section_id", "day_of_week"),
    )
