from datetime import datetime
from typing import Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from schoolhub.utils.time_utils import normalize_time_string, time_to_minutes
from schoolhub.utils.weekdays import WeekDay


def _normalized(v: str) -> str:
    out = normalize_time_string(v)
    if out is None:
        raise ValueError(f"Invalid time format: {v!r}, expected HH:MM")
    return out


class TimeSlotCreate(BaseModel):
    start_time: str = Field(description="e.g. '9:30', '09:30', '09:30:00'")
    end_time: str
    day_of_week: WeekDay
    subject_id: str
    teacher_id: str
    class_id: str
    section_id: str
    academic_year_id: str

    @field_validator("start_time", "end_time")
    @classmethod
    def _check_time(cls, v):
        return _normalized(v)

    @model_validator(mode="after")
    def _check_order(self):
        if time_to_minutes(self.end_time) <= time_to_minutes(self.start_time):
            raise ValueError("end_time must be after start_time")
        return self


class TimeSlotUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    start_time: Optional[str] = None
    end_time: Optional[str] = None
    day_of_week: Optional[WeekDay] = None
    subject_id: Optional[str] = None
    teacher_id: Optional[str] = None
    class_id: Optional[str] = None
    section_id: Optional[str] = None
    academic_year_id: Optional[str] = None

    @field_validator("start_time", "end_time")
    @classmethod
    def _check_time(cls, v):
        if v is None:
            return v
        return _normalized(v)

    @model_validator(mode="after")
    def _reject_nulls(self):
        # omit a field to keep it, every stored column is NOT NULL
        nulls = sorted(k for k in self.model_fields_set if getattr(self, k) is None)
        if nulls:
            raise ValueError(f"{', '.join(nulls)} cannot be null, omit the field to keep the current value")
        return self


class TimeSlotOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    start_time: str
    end_time: str
    duration: Optional[int] = None
    day_of_week: str
    subject_id: str
    teacher_id: str
    class_id: str
    section_id: str
    academic_year_id: str
    created_at: datetime
    updated_at: datetime


class ConflictCheckIn(BaseModel):
    # raw strings on purpose: a malformed time answers "no conflict"
    start_time: str
    end_time: str
    day_of_week: WeekDay
    section_id: str
    exclude_id: Optional[str] = None


class ConflictCheckOut(BaseModel):
    has_conflict: bool
    conflict_slot_id: Optional[str] = None


class WeekDayOut(BaseModel):
    name: WeekDay
    number: int  # 1 = Monday ... 7 = Sunday


class TimetableGridSlotOut(BaseModel):
    id: str
    start_time: str
    end_time: str
    start_label: str
    end_label: str
    subject_id: str
    teacher_id: str


class TimetableGridOut(BaseModel):
    section_id: str
    grid: Dict[str, List[TimetableGridSlotOut]]  # "1".."7"
