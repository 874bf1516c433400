"""Unit conversion to and from hours."""

from typing import Dict, Union

from ..models.task import TimeUnit, TimeValue

# Working-time convention: 8-hour day, 5-day week.
TIME_UNIT_TO_HOURS: Dict[TimeUnit, float] = {
    TimeUnit.MINUTES: 1 / 60,
    TimeUnit.HOURS: 1.0,
    TimeUnit.DAYS: 8.0,
    TimeUnit.WEEKS: 40.0,
}


def to_hours(time_value: TimeValue) -> float:
    """Convert a tagged time value to hours."""
    return time_value.value * TIME_UNIT_TO_HOURS[TimeUnit.parse(time_value.unit)]


def from_hours(hours: float, target_unit: Union[TimeUnit, str]) -> float:
    """Express a number of hours in ``target_unit``."""
    return hours / TIME_UNIT_TO_HOURS[TimeUnit.parse(target_unit)]
