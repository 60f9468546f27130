"""
Coursehub: an in-memory course catalog with student enrollments.

Keeps the set of offered courses and the set of student enrollments,
enforces their uniqueness rules, and answers membership and lookup queries.
"""

from .config import CatalogSettings
from .core import (
    EMPTY_COURSE,
    CatalogEvent,
    CatalogEventType,
    Course,
    CourseCatalog,
    CoursehubException,
    ConfigurationError,
    DuplicatePolicy,
    Enrollment,
    EventHandler,
)
from .services import InMemoryCourseCatalog, create_catalog

__version__ = "1.0.0"
__author__ = "Coursehub Development Team"
__description__ = "In-memory course catalog and enrollment registry"

__all__ = [
    "CatalogSettings",
    "EMPTY_COURSE",
    "CatalogEvent",
    "CatalogEventType",
    "Course",
    "CourseCatalog",
    "CoursehubException",
    "ConfigurationError",
    "DuplicatePolicy",
    "Enrollment",
    "EventHandler",
    "InMemoryCourseCatalog",
    "create_catalog",
]
