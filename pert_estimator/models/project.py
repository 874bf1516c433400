"""Project-level containers: import results, export envelopes, saved projects."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .task import ProjectSummary, Task

FORMAT_VERSION = "1.0"


@dataclass
class ImportResult:
    """Outcome of parsing an external task file.

    ``tasks`` may be non-empty even when ``is_valid`` is False; the caller
    decides whether to accept a partial import.
    """

    project_name: Optional[str] = None
    tasks: List[Task] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @classmethod
    def failure(cls, message: str) -> "ImportResult":
        """Result for input rejected before any row was parsed."""
        return cls(errors=[message])


@dataclass
class ExportData:
    """Versioned JSON export envelope."""

    tasks: List[Task]
    project_summary: ProjectSummary
    exported_at: str
    project_name: Optional[str] = None
    version: str = FORMAT_VERSION

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        if self.project_name is not None:
            data['projectName'] = self.project_name
        data.update({
            'tasks': [task.to_dict() for task in self.tasks],
            'projectSummary': self.project_summary.to_dict(),
            'exportedAt': self.exported_at,
            'version': self.version,
        })
        return data


@dataclass
class SavedProject:
    """A named task collection as held by a project store."""

    id: str
    name: str
    tasks: List[Task]
    created_at: str
    updated_at: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'name': self.name,
            'tasks': [task.to_dict() for task in self.tasks],
            'createdAt': self.created_at,
            'updatedAt': self.updated_at,
        }
