"""
Enumerations and constants for the Coursehub catalog.
"""

from enum import Enum


class DuplicatePolicy(Enum):
    """How add_course decides that a course is already in the catalog."""
    VALUE = "value"          # all four course fields must match
    COURSE_ID = "course_id"  # any stored course with the same id


class CatalogEventType(Enum):
    """Types of catalog state changes."""
    COURSE_ADDED = "course_added"
    COURSE_REMOVED = "course_removed"
    STUDENT_ENROLLED = "student_enrolled"
    STUDENT_UNENROLLED = "student_unenrolled"
