"""
Input models for untrusted task payloads.

These pydantic models validate the structure of JSON imports and stored
projects before anything is turned into a TaskEstimate. They check shape and
types only; the estimate ordering rule is enforced by the engine.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .task import TaskEstimate, TimeUnit, TimeValue


class BaseInput(BaseModel):
    """Base for all input models; unknown keys such as derived fields are ignored."""

    model_config = ConfigDict(extra="ignore", frozen=True)


class TimeValueInput(BaseInput):
    """A magnitude and its unit, e.g. ``{"value": 4, "unit": "hours"}``."""

    value: float = Field(
        ...,
        description="Duration magnitude",
        strict=True,
        allow_inf_nan=False,
    )
    unit: TimeUnit = Field(
        ...,
        description="One of: minutes, hours, days, weeks",
    )

    @field_validator("value", mode="before")
    @classmethod
    def reject_booleans(cls, v: Any) -> Any:
        if isinstance(v, bool):
            raise ValueError("must be a number, not a boolean")
        return v

    def to_time_value(self) -> TimeValue:
        return TimeValue(float(self.value), self.unit)


class EstimateInput(BaseInput):
    """Three-point estimate."""

    optimistic: TimeValueInput
    nominal: TimeValueInput
    pessimistic: TimeValueInput

    def to_estimate(self) -> TaskEstimate:
        return TaskEstimate(
            optimistic=self.optimistic.to_time_value(),
            nominal=self.nominal.to_time_value(),
            pessimistic=self.pessimistic.to_time_value(),
        )


class TaskItemInput(BaseInput):
    """A task-like object from a bare array; any ``id`` is ignored."""

    name: Optional[str] = Field(default=None, description="Display name")
    estimate: EstimateInput

    @property
    def task_id(self) -> Optional[str]:
        return None


class EnvelopeTaskInput(TaskItemInput):
    """A task from the export envelope, which may carry its own id."""

    id: Optional[str] = Field(default=None, description="Task identifier to preserve")

    @property
    def task_id(self) -> Optional[str]:
        return self.id or None


class SavedProjectInput(BaseInput):
    """A stored project record in its wire shape."""

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    id: str
    name: str
    tasks: List[EnvelopeTaskInput]
    created_at: str = Field(..., alias="createdAt")
    updated_at: str = Field(..., alias="updatedAt")


def describe_validation_error(error: ValidationError) -> str:
    """Compact one-line summary of a pydantic ValidationError."""
    parts = []
    for detail in error.errors():
        location = ".".join(str(part) for part in detail["loc"])
        parts.append(f"{location}: {detail['msg']}" if location else detail["msg"])
    return "; ".join(parts)
