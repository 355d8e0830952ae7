import uuid
from datetime import datetime

from sqlalchemy import Column, DateTime, String, UniqueConstraint
from schoolhub.database import Base

class Teacher(Base):
    __tablename__ = "teachers"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String(100), nullable=False)
    employee_id = Column(String(30), nullable=False)
    email = Column(String(255))
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    __table_args__ = (
        UniqueConstraint("employee_id", name="unique_teacher_employee_id"),
    )
