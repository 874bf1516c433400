"""Exception hierarchy for the PERT estimator."""


class PertEstimatorError(Exception):
    """Base class for all estimator errors."""


class InvalidEstimateError(PertEstimatorError, ValueError):
    """Raised when an estimate violates 0 < optimistic <= nominal <= pessimistic."""


class MalformedInputError(PertEstimatorError, ValueError):
    """Raised when external input cannot be parsed into the expected structure."""


class ProjectNotFoundError(PertEstimatorError, KeyError):
    """Raised when a saved project id is not present in the store."""

    def __init__(self, project_id: str):
        super().__init__(project_id)
        self.project_id = project_id

    def __str__(self) -> str:
        return f"Project not found: {self.project_id}"
