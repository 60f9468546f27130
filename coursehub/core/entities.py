"""
Core entities for the Coursehub catalog.

Courses and enrollments are immutable values. A course is keyed by its
``course_id`` inside the catalog, but Python equality compares all four
fields, which is what the default duplicate check in ``add_course`` relies on.
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Any, Dict, Mapping

from .enums import CatalogEventType


@dataclass(frozen=True)
class Course:
    """A course offered by the catalog."""
    course_id: str
    title: str
    instructor: str
    category: str

    @classmethod
    def empty(cls) -> "Course":
        """Placeholder course used when an enrollment's course is gone."""
        return EMPTY_COURSE

    @property
    def is_empty(self) -> bool:
        return self == EMPTY_COURSE

    def to_dict(self) -> Dict[str, str]:
        """Convert course to dictionary."""
        return {
            'course_id': self.course_id,
            'title': self.title,
            'instructor': self.instructor,
            'category': self.category,
        }

    def __str__(self) -> str:
        if self.is_empty:
            return "Course(<empty>)"
        return f"Course({self.course_id}: {self.title})"


EMPTY_COURSE = Course("", "", "", "")


@dataclass(frozen=True)
class Enrollment:
    """A student enrolled in a course, both referenced by id."""
    student_id: str
    course_id: str

    def matches(self, student_id: str, course_id: str) -> bool:
        return self.student_id == student_id and self.course_id == course_id

    def to_dict(self) -> Dict[str, str]:
        return {
            'student_id': self.student_id,
            'course_id': self.course_id,
        }


@dataclass(frozen=True, eq=False)
class CatalogEvent:
    """
    Record of a change applied to the catalog.

    Events compare and hash by identity. ``event_data`` is a read-only copy,
    so one handler cannot alter what the next handler sees.
    """
    event_type: CatalogEventType
    event_data: Mapping[str, Any]
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    event_id: str = field(default_factory=lambda: str(uuid.uuid4()))

    def __post_init__(self):
        object.__setattr__(self, "event_data", MappingProxyType(dict(self.event_data)))

    def to_dict(self) -> Dict[str, Any]:
        """Convert event to dictionary."""
        return {
            'event_id': self.event_id,
            'event_type': self.event_type.value,
            'event_data': dict(self.event_data),
            'timestamp': self.timestamp.isoformat(),
        }
