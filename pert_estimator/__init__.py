"""PERT three-point estimation, project aggregation and task import/export."""

__version__ = "0.1.0"

from .exceptions import (
    InvalidEstimateError,
    MalformedInputError,
    PertEstimatorError,
    ProjectNotFoundError,
)

__all__ = [
    '__version__',
    'InvalidEstimateError',
    'MalformedInputError',
    'PertEstimatorError',
    'ProjectNotFoundError',
]
