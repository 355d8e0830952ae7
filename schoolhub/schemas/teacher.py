from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

class TeacherCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    employee_id: str = Field(min_length=1, max_length=30)
    email: Optional[str] = None

class TeacherOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    employee_id: str
    email: Optional[str] = None
    created_at: datetime
