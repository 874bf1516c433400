"""Data models."""

from .project import FORMAT_VERSION, ExportData, ImportResult, SavedProject
from .task import PertResult, ProjectSummary, Task, TaskEstimate, TimeUnit, TimeValue

__all__ = [
    'FORMAT_VERSION',
    'ExportData',
    'ImportResult',
    'SavedProject',
    'PertResult',
    'ProjectSummary',
    'Task',
    'TaskEstimate',
    'TimeUnit',
    'TimeValue',
]
