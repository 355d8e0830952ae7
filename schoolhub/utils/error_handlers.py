import logging

from sqlalchemy.exc import DBAPIError

logger = logging.getLogger("schoolhub.db")

UNKNOWN_ERROR_MESSAGE = "An unknown error occurred. Please try again."

# unique constraint name -> message shown to the user
CONSTRAINT_MESSAGES = {
    "unique_teacher_employee_id": "This Employee ID is already in use. Please use a different one.",
    "unique_student_admission_number": "This Admission Number is already in use. Please use a different one.",
}

# sqlite names the column, not the constraint; only tables declared in models/
CONSTRAINT_COLUMNS = {
    "unique_teacher_employee_id": "teachers.employee_id",
}


def _error_text(error) -> str:
    if isinstance(error, DBAPIError) and error.orig is not None:
        return str(error.orig)
    if isinstance(error, BaseException):
        return str(error)
    return str(getattr(error, "message", "") or "")


def handle_database_error(error) -> str:
    """
    Turn a database error into a message the user can act on.
    Known unique constraint violations get a friendly message,
    everything else falls back to the error's own text.
    """
    logger.error("Database error: %s", error)

    text = _error_text(error)
    for constraint, message in CONSTRAINT_MESSAGES.items():
        column = CONSTRAINT_COLUMNS.get(constraint)
        if constraint in text or (column and column in text):
            return message

    return text or UNKNOWN_ERROR_MESSAGE
