import logging
from enum import Enum
from typing import Any, Iterable, Optional

from schoolhub.utils.time_utils import normalize_time_string, time_to_minutes

logger = logging.getLogger("schoolhub.conflict")


def _day_value(day):
    # WeekDay.MONDAY and "Monday" must compare equal
    return day.value if isinstance(day, Enum) else day


def _overlaps(new_start: int, new_end: int, slot_start: int, slot_end: int) -> bool:
    return (
        (slot_start <= new_start < slot_end)           # starts during existing slot
        or (slot_start < new_end <= slot_end)          # ends during existing slot
        or (new_start <= slot_start and new_end >= slot_end)  # contains existing slot
    )


def find_conflict(candidate, existing_slots: Iterable[Any], exclude_id=None):
    """
    candidate: anything with start_time / end_time / day_of_week / section_id
    existing_slots: time slots already stored (same attributes + id)
    exclude_id: id of the slot being edited, so it is not compared with itself

    Returns the first existing slot that overlaps the candidate on the same
    day and section, or None.

    A candidate whose times cannot be normalized never conflicts; the format
    error is reported by whoever validates the form.
    """
    new_start_n = normalize_time_string(candidate.start_time)
    new_end_n = normalize_time_string(candidate.end_time)
    if new_start_n is None or new_end_n is None:
        return None

    new_start = time_to_minutes(new_start_n)
    new_end = time_to_minutes(new_end_n)
    day = _day_value(candidate.day_of_week)

    for slot in existing_slots:
        if exclude_id is not None and slot.id == exclude_id:
            continue

        if _day_value(slot.day_of_week) != day or slot.section_id != candidate.section_id:
            continue

        slot_start_n = normalize_time_string(slot.start_time)
        slot_end_n = normalize_time_string(slot.end_time)
        if slot_start_n is None or slot_end_n is None:
            # FIXME: a stored slot with a broken time is treated as free, which
            # can let a real clash through. Kept until stored times are cleaned up.
            logger.warning(
                "Skipping slot %s with malformed time %r-%r",
                slot.id, slot.start_time, slot.end_time,
            )
            continue

        if _overlaps(new_start, new_end, time_to_minutes(slot_start_n), time_to_minutes(slot_end_n)):
            return slot

    return None


def has_conflict(candidate, existing_slots: Iterable[Any], exclude_id=None) -> bool:
    return find_conflict(candidate, existing_slots, exclude_id) is not None
