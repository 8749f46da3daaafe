"""Project discovery and content access."""

from .registry import (
    PageOutOfRange,
    Project,
    ProjectNotFound,
    ProjectRegistry,
    ProjectType,
    classify_path,
    project_registry,
    total_pages_for,
)

__all__ = [
    'PageOutOfRange',
    'Project',
    'ProjectNotFound',
    'ProjectRegistry',
    'ProjectType',
    'classify_path',
    'project_registry',
    'total_pages_for',
]
