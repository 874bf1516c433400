"""Presentation helpers for durations and export filenames."""

import re
from datetime import date
from typing import Dict, List, Optional, Union

from ..engine.conversion import from_hours
from ..models.task import TimeUnit
from .datetime_utils import format_date

DEFAULT_FILE_STEM = "pert_tasks"


def format_duration(hours: float, unit: Union[TimeUnit, str]) -> str:
    """Render hours in ``unit`` with two decimals, e.g. ``"1.50 days"``."""
    unit = TimeUnit.parse(unit)
    return f"{from_hours(hours, unit):.2f} {unit.value}"


def get_time_unit_options() -> List[Dict[str, str]]:
    """Label/value pairs for unit pickers, in enum order."""
    return [{'label': unit.value.capitalize(), 'value': unit.value} for unit in TimeUnit]


def sanitize_filename(name: str) -> str:
    """Lowercase and replace every character outside [a-z0-9] with an underscore."""
    return re.sub(r'[^a-z0-9]', '_', name.lower())


def generate_filename(
    project_name: Optional[str],
    extension: str,
    today: Optional[date] = None,
) -> str:
    """Build ``<project-or-pert_tasks>_<YYYY-MM-DD>.<ext>``."""
    if project_name and project_name.strip():
        stem = sanitize_filename(project_name)
    else:
        stem = DEFAULT_FILE_STEM
    return f"{stem}_{format_date(today)}.{extension.lstrip('.')}"
