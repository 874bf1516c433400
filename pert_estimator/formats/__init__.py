"""Import and export formats."""

from .csv_format import CSV_HEADERS, export_to_csv, import_from_csv
from .json_format import export_to_json, import_from_json, task_from_dict
from .markdown_format import export_to_markdown

__all__ = [
    'CSV_HEADERS',
    'export_to_csv',
    'import_from_csv',
    'export_to_json',
    'import_from_json',
    'task_from_dict',
    'export_to_markdown',
]
