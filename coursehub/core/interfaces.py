"""
Core interfaces and abstract base classes for the Coursehub catalog.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Tuple

from .entities import CatalogEvent, Course, Enrollment


class EventHandler(ABC):
    """Abstract base class for catalog event handlers."""

    @abstractmethod
    def handle_event(self, event: CatalogEvent) -> None:
        """Handle an event."""
        pass

    @abstractmethod
    def can_handle(self, event_type: str) -> bool:
        """Check if this handler can handle the event type."""
        pass


class CourseCatalog(ABC):
    """
    Manages courses and student enrollments.

    None of the operations raise for unknown courses or students: enrolling
    into a missing course, removing a missing course and unenrolling a pair
    that is not enrolled are all silent no-ops, and lookups of unknown ids
    return ``None`` or an empty tuple.
    """

    @abstractmethod
    def add_course(self, course: Course) -> None:
        """Add a course to the catalog unless it is already present."""
        pass

    @abstractmethod
    def remove_course(self, course: Course) -> None:
        """
        Remove every course sharing ``course.course_id``.

        Enrollments referencing the removed course are kept.
        """
        pass

    @abstractmethod
    def is_course_available(self, course_id: str) -> bool:
        """Check if a course with the given id exists in the catalog."""
        pass

    @abstractmethod
    def get_course(self, course_id: str) -> Optional[Course]:
        """Return the first course with the given id, or None."""
        pass

    @abstractmethod
    def find_courses_by_category(self, category: str) -> Tuple[Course, ...]:
        """Return all courses in a category, in insertion order."""
        pass

    @abstractmethod
    def enroll_student(self, student_id: str, course_id: str) -> None:
        """Enroll a student if the course exists and they are not yet enrolled."""
        pass

    @abstractmethod
    def unenroll_student(self, student_id: str, course_id: str) -> None:
        """Remove the student's enrollment in the course, if any."""
        pass

    @abstractmethod
    def is_student_enrolled(self, student_id: str, course_id: str) -> bool:
        """Check if a student is enrolled in a course."""
        pass

    @abstractmethod
    def get_student_enrollments(self, student_id: str) -> Tuple[Course, ...]:
        """
        Return the courses a student is enrolled in, in enrollment order.

        Enrollments whose course has been removed resolve to the empty
        course instead of being skipped.
        """
        pass

    @property
    @abstractmethod
    def courses(self) -> Tuple[Course, ...]:
        """Snapshot of all stored courses."""
        pass

    @property
    @abstractmethod
    def enrollments(self) -> Tuple[Enrollment, ...]:
        """Snapshot of all stored enrollments."""
        pass

    @abstractmethod
    def get_statistics(self) -> Dict[str, Any]:
        """Get catalog statistics."""
        pass
