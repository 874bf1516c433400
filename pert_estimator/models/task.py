"""Estimate and task data models."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Union


class TimeUnit(str, Enum):
    """Units a duration can be expressed in."""

    MINUTES = "minutes"
    HOURS = "hours"
    DAYS = "days"
    WEEKS = "weeks"

    @classmethod
    def parse(cls, value: Union["TimeUnit", str]) -> "TimeUnit":
        """Resolve a unit from an enum member or its string name."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"Unknown time unit: {value!r}") from None

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class TimeValue:
    """A magnitude tagged with its unit."""

    value: float
    unit: TimeUnit

    def to_dict(self) -> Dict[str, Any]:
        return {'value': self.value, 'unit': self.unit.value}


@dataclass(frozen=True)
class TaskEstimate:
    """Three-point estimate for a single task."""

    optimistic: TimeValue
    nominal: TimeValue
    pessimistic: TimeValue

    def to_dict(self) -> Dict[str, Any]:
        return {
            'optimistic': self.optimistic.to_dict(),
            'nominal': self.nominal.to_dict(),
            'pessimistic': self.pessimistic.to_dict(),
        }


@dataclass(frozen=True)
class PertResult:
    """Derived PERT statistics, all in hours."""

    expected_duration: float
    standard_deviation: float
    variance: float


@dataclass(frozen=True)
class Task:
    """An estimated task.

    Build tasks with ``engine.pert.create_task`` so the estimate is validated
    and the derived fields are consistent with it.
    """

    id: str
    name: Optional[str]
    estimate: TaskEstimate
    expected_duration: float
    standard_deviation: float
    variance: float

    def display_name(self, position: int) -> str:
        """Name to show for the task at 1-based ``position``."""
        return self.name if self.name else f"Task {position}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert task to its JSON wire shape."""
        data: Dict[str, Any] = {'id': self.id}
        if self.name is not None:
            data['name'] = self.name
        data.update({
            'estimate': self.estimate.to_dict(),
            'expectedDuration': self.expected_duration,
            'standardDeviation': self.standard_deviation,
            'variance': self.variance,
        })
        return data


@dataclass
class ProjectSummary:
    """Aggregate statistics over a task collection."""

    total_expected_duration: float = 0.0
    total_standard_deviation: float = 0.0
    total_variance: float = 0.0
    tasks: List[Task] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'totalExpectedDuration': self.total_expected_duration,
            'totalStandardDeviation': self.total_standard_deviation,
            'totalVariance': self.total_variance,
            'tasks': [task.to_dict() for task in self.tasks],
        }
