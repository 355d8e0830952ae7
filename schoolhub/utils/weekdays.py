from enum import Enum
from typing import List, Union


class InvalidWeekdayError(ValueError):
    """Day number out of range or day name outside the seven weekdays."""


class WeekDay(str, Enum):
    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"
    SUNDAY = "Sunday"


# calendar order: index == day number, 0 = Sunday
_CALENDAR_DAYS = [
    WeekDay.SUNDAY,
    WeekDay.MONDAY,
    WeekDay.TUESDAY,
    WeekDay.WEDNESDAY,
    WeekDay.THURSDAY,
    WeekDay.FRIDAY,
    WeekDay.SATURDAY,
]


def _to_weekday(day: Union[WeekDay, str]) -> WeekDay:
    try:
        return WeekDay(day)
    except ValueError:
        raise InvalidWeekdayError(f"Unknown weekday: {day!r}") from None


def _check_number(n: int, low: int, high: int) -> int:
    # bool is an int subclass, True must not mean Monday
    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidWeekdayError(f"Day number must be an integer, got {n!r}")
    if not low <= n <= high:
        raise InvalidWeekdayError(f"Day number {n} outside {low}..{high}")
    return n


def map_number_to_day(n: int) -> WeekDay:
    """0 = Sunday ... 6 = Saturday."""
    return _CALENDAR_DAYS[_check_number(n, 0, 6)]


def map_day_to_number(day: Union[WeekDay, str]) -> int:
    """Sunday = 0 ... Saturday = 6."""
    return _CALENDAR_DAYS.index(_to_weekday(day))


def map_day_to_timetable_number(day: Union[WeekDay, str]) -> int:
    """ISO weekday: Monday = 1 ... Sunday = 7."""
    return (map_day_to_number(day) + 6) % 7 + 1


def map_timetable_number_to_day(n: int) -> WeekDay:
    """1 = Monday ... 7 = Sunday."""
    return _CALENDAR_DAYS[_check_number(n, 1, 7) % 7]


def timetable_week() -> List[WeekDay]:
    """Monday first, the order timetables are shown in."""
    return [map_timetable_number_to_day(n) for n in range(1, 8)]
