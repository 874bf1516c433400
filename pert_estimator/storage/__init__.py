"""Saved-project persistence."""

from .base import ProjectStore
from .json_file import JsonFileProjectStore
from .manager import ProjectManager
from .memory import InMemoryProjectStore

__all__ = ['ProjectStore', 'JsonFileProjectStore', 'ProjectManager', 'InMemoryProjectStore']
