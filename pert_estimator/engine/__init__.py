"""Estimation engine."""

from .conversion import TIME_UNIT_TO_HOURS, from_hours, to_hours
from .pert import calculate_pert, calculate_project_summary, create_task, validate_estimate

__all__ = [
    'TIME_UNIT_TO_HOURS',
    'from_hours',
    'to_hours',
    'calculate_pert',
    'calculate_project_summary',
    'create_task',
    'validate_estimate',
]
