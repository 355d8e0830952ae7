from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from schoolhub.config import settings
from schoolhub.database import get_db
from schoolhub.models.time_slot import TimeSlot
from schoolhub.schemas.timetable import (
    ConflictCheckIn, ConflictCheckOut,
    TimeSlotCreate, TimeSlotUpdate, TimeSlotOut,
    TimetableGridOut, TimetableGridSlotOut, WeekDayOut,
)
from schoolhub.utils.conflict import find_conflict
from schoolhub.utils.error_handlers import handle_database_error
from schoolhub.utils.time_utils import (
    format_time_display, minutes_between, normalize_time_string, time_range, time_to_minutes,
)
from schoolhub.utils.weekdays import (
    InvalidWeekdayError, WeekDay, map_day_to_timetable_number, timetable_week,
)

import logging
logger = logging.getLogger("schoolhub.timetable")


router = APIRouter(prefix="/timetable", tags=["Timetable"])


def _day_order(day: str) -> int:
    # rows with an unknown day go last
    try:
        return map_day_to_timetable_number(day)
    except InvalidWeekdayError:
        return 8


def _start_order(value: str) -> int:
    normalized = normalize_time_string(value)
    return time_to_minutes(normalized) if normalized else 24 * 60


def _same_day_slots(db: Session, section_id: str, day: WeekDay):
    return (
        db.query(TimeSlot)
        .filter(TimeSlot.section_id == section_id, TimeSlot.day_of_week == day.value)
        .all()
    )


def _get_slot_or_404(db: Session, slot_id: str) -> TimeSlot:
    slot = db.query(TimeSlot).filter(TimeSlot.id == slot_id).first()
    if not slot:
        raise HTTPException(status_code=404, detail="Time slot not found")
    return slot


def _raise_conflict(clash: TimeSlot):
    logger.info("Time slot conflicts with %s (%s %s-%s)", clash.id, clash.day_of_week, clash.start_time, clash.end_time)
    raise HTTPException(
        status_code=409,
        detail={"message": "Time conflict", "conflict_slot_id": clash.id},
    )


def _commit(db: Session):
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise HTTPException(status_code=400, detail=handle_database_error(e))


@router.get("/slots", response_model=list[TimeSlotOut])
def list_time_slots(
    db: Session = Depends(get_db),
    day_of_week: Optional[WeekDay] = Query(None),
    class_id: Optional[str] = Query(None),
    section_id: Optional[str] = Query(None),
    teacher_id: Optional[str] = Query(None),
    academic_year_id: Optional[str] = Query(None),
):
    q = db.query(TimeSlot)

    if day_of_week is not None:
        q = q.filter(TimeSlot.day_of_week == day_of_week.value)
    if class_id:
        q = q.filter(TimeSlot.class_id == class_id)
    if section_id:
        q = q.filter(TimeSlot.section_id == section_id)
    if teacher_id:
        q = q.filter(TimeSlot.teacher_id == teacher_id)
    if academic_year_id:
        q = q.filter(TimeSlot.academic_year_id == academic_year_id)

    rows = q.all()
    return sorted(rows, key=lambda s: (_day_order(s.day_of_week), _start_order(s.start_time)))


@router.get("/slots/{slot_id}", response_model=TimeSlotOut)
def get_time_slot(slot_id: str, db: Session = Depends(get_db)):
    return _get_slot_or_404(db, slot_id)


@router.post("/slots", response_model=TimeSlotOut, status_code=201)
def create_time_slot(body: TimeSlotCreate, db: Session = Depends(get_db)):
    existing = _same_day_slots(db, body.section_id, body.day_of_week)
    clash = find_conflict(body, existing)
    if clash is not None:
        _raise_conflict(clash)

    slot = TimeSlot(
        start_time=body.start_time,
        end_time=body.end_time,
        duration=minutes_between(body.start_time, body.end_time),
        day_of_week=body.day_of_week.value,
        subject_id=body.subject_id,
        teacher_id=body.teacher_id,
        class_id=body.class_id,
        section_id=body.section_id,
        academic_year_id=body.academic_year_id,
    )
    db.add(slot)
    _commit(db)
    db.refresh(slot)

    logger.info("Created time slot %s (%s %s-%s, section %s)", slot.id, slot.day_of_week, slot.start_time, slot.end_time, slot.section_id)
    return slot


@router.put("/slots/{slot_id}", response_model=TimeSlotOut)
def update_time_slot(slot_id: str, body: TimeSlotUpdate, db: Session = Depends(get_db)):
    slot = _get_slot_or_404(db, slot_id)
    data = body.model_dump(exclude_unset=True)

    # merge with the stored row, the stored times may predate normalization
    start = normalize_time_string(data.get("start_time") or slot.start_time)
    end = normalize_time_string(data.get("end_time") or slot.end_time)
    if start is None or end is None:
        raise HTTPException(status_code=422, detail="Invalid time format, expected HH:MM")
    if time_to_minutes(end) <= time_to_minutes(start):
        raise HTTPException(status_code=422, detail="end_time must be after start_time")

    try:
        day = WeekDay(data.get("day_of_week") or slot.day_of_week)
    except ValueError:
        raise HTTPException(status_code=422, detail=f"Unknown weekday: {slot.day_of_week}")

    section_id = data.get("section_id") or slot.section_id

    candidate = ConflictCheckIn(start_time=start, end_time=end, day_of_week=day, section_id=section_id)
    clash = find_conflict(candidate, _same_day_slots(db, section_id, day), exclude_id=slot.id)
    if clash is not None:
        _raise_conflict(clash)

    for k, v in data.items():
        setattr(slot, k, v)
    slot.start_time = start
    slot.end_time = end
    slot.day_of_week = day.value
    slot.duration = minutes_between(start, end)

    _commit(db)
    db.refresh(slot)
    return slot


@router.delete("/slots/{slot_id}")
def delete_time_slot(slot_id: str, db: Session = Depends(get_db)):
    slot = _get_slot_or_404(db, slot_id)
    db.delete(slot)
    db.commit()
    logger.info("Deleted time slot %s", slot_id)
    return {"detail": "deleted"}


@router.post("/validate", response_model=ConflictCheckOut)
def validate_time_slot(body: ConflictCheckIn, db: Session = Depends(get_db)):
    existing = _same_day_slots(db, body.section_id, body.day_of_week)
    clash = find_conflict(body, existing, exclude_id=body.exclude_id)
    return ConflictCheckOut(
        has_conflict=clash is not None,
        conflict_slot_id=clash.id if clash is not None else None,
    )


@router.get("/weekdays", response_model=list[WeekDayOut])
def list_weekdays():
    return [
        WeekDayOut(name=d, number=map_day_to_timetable_number(d))
        for d in timetable_week()
    ]


@router.get("/time-range", response_model=list[str])
def get_time_range():
    return time_range(
        settings.TIMETABLE_DAY_START_HOUR,
        settings.TIMETABLE_DAY_END_HOUR,
        settings.TIMETABLE_STEP_MINUTES,
    )


@router.get("/grid", response_model=TimetableGridOut)
def get_section_grid(
    db: Session = Depends(get_db),
    section_id: str = Query(...),
    academic_year_id: Optional[str] = Query(None),
):
    q = db.query(TimeSlot).filter(TimeSlot.section_id == section_id)
    if academic_year_id:
        q = q.filter(TimeSlot.academic_year_id == academic_year_id)

    grid = {str(n): [] for n in range(1, 8)}
    for s in sorted(q.all(), key=lambda x: _start_order(x.start_time)):
        try:
            key = str(map_day_to_timetable_number(s.day_of_week))
        except InvalidWeekdayError:
            logger.warning("Time slot %s has unknown weekday %r", s.id, s.day_of_week)
            continue

        grid[key].append(
            TimetableGridSlotOut(
                id=s.id,
                start_time=s.start_time,
                end_time=s.end_time,
                start_label=format_time_display(s.start_time),
                end_label=format_time_display(s.end_time),
                subject_id=s.subject_id,
                teacher_id=s.teacher_id,
            )
        )

    return TimetableGridOut(section_id=section_id, grid=grid)
