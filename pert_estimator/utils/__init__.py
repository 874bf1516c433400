"""Utility functions."""

from .config import get_default_config, load_config, merge_config, resolve_config
from .datetime_utils import format_date, to_iso_timestamp, utc_now
from .formatting import format_duration, generate_filename, get_time_unit_options

__all__ = [
    'get_default_config',
    'load_config',
    'merge_config',
    'resolve_config',
    'format_date',
    'to_iso_timestamp',
    'utc_now',
    'format_duration',
    'generate_filename',
    'get_time_unit_options',
]
