from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from schoolhub.database import get_db
from schoolhub.models.teacher import Teacher
from schoolhub.schemas.teacher import TeacherCreate, TeacherOut
from schoolhub.utils.error_handlers import handle_database_error

import logging
logger = logging.getLogger("schoolhub.teachers")


router = APIRouter(prefix="/teachers", tags=["Teachers"])


@router.get("", response_model=list[TeacherOut])
def list_teachers(db: Session = Depends(get_db)):
    return db.query(Teacher).order_by(Teacher.name.asc()).all()


@router.post("", response_model=TeacherOut, status_code=201)
def create_teacher(body: TeacherCreate, db: Session = Depends(get_db)):
    t = Teacher(
        name=body.name.strip(),
        employee_id=body.employee_id.strip(),
        email=body.email,
    )
    db.add(t)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise HTTPException(status_code=400, detail=handle_database_error(e))

    db.refresh(t)
    logger.info("Created teacher %s (%s)", t.id, t.employee_id)
    return t
