"""
In-memory course catalog with enrollment tracking.
"""

import logging
import threading
from contextlib import nullcontext
from typing import Any, Dict, List, Optional, Tuple

from ..config import CatalogSettings
from ..core.entities import EMPTY_COURSE, CatalogEvent, Course, Enrollment
from ..core.enums import CatalogEventType, DuplicatePolicy
from ..core.interfaces import CourseCatalog, EventHandler


logger = logging.getLogger(__name__)


class InMemoryCourseCatalog(CourseCatalog):
    """Catalog keeping courses and enrollments in insertion-ordered lists."""

    def __init__(self, settings: Optional[CatalogSettings] = None):
        self._settings = settings or CatalogSettings()
        self._courses: List[Course] = []
        self._enrollments: List[Enrollment] = []
        self._event_handlers: List[EventHandler] = []
        # One lock for both collections: enroll_student reads courses and
        # enrollments before it writes.
        self._lock = threading.RLock() if self._settings.thread_safe else nullcontext()

    @property
    def settings(self) -> CatalogSettings:
        """Settings this catalog was created with."""
        return self._settings

    def add_event_handler(self, handler: EventHandler) -> None:
        """Add an event handler."""
        with self._lock:
            self._event_handlers.append(handler)

    def remove_event_handler(self, handler: EventHandler) -> None:
        """Remove a previously added event handler."""
        with self._lock:
            self._event_handlers = [h for h in self._event_handlers if h is not handler]

    # Courses

    def add_course(self, course: Course) -> None:
        """Add a course unless the duplicate policy finds it already stored."""
        with self._lock:
            if self._contains_course(course):
                logger.debug("Course %s already in catalog, not added", course.course_id)
                return
            self._courses.append(course)
        logger.debug("Added course %s (%s)", course.course_id, course.category)
        self._publish_event(CatalogEventType.COURSE_ADDED, course.to_dict())

    def remove_course(self, course: Course) -> None:
        """Remove every course sharing the course id; enrollments are kept."""
        with self._lock:
            remaining = [c for c in self._courses if c.course_id != course.course_id]
            removed = len(self._courses) - len(remaining)
            self._courses = remaining
        if not removed:
            logger.debug("Course %s not in catalog, nothing removed", course.course_id)
            return
        logger.debug("Removed %d course(s) with id %s", removed, course.course_id)
        self._publish_event(CatalogEventType.COURSE_REMOVED, {
            'course_id': course.course_id,
            'removed': removed,
        })

    def is_course_available(self, course_id: str) -> bool:
        """Check if a course with the given id is stored."""
        with self._lock:
            return any(c.course_id == course_id for c in self._courses)

    def get_course(self, course_id: str) -> Optional[Course]:
        """Get the first course with the given id, or None."""
        with self._lock:
            return next((c for c in self._courses if c.course_id == course_id), None)

    def find_courses_by_category(self, category: str) -> Tuple[Course, ...]:
        """Get all courses in a category, in insertion order."""
        with self._lock:
            return tuple(c for c in self._courses if c.category == category)

    # Enrollments

    def enroll_student(self, student_id: str, course_id: str) -> None:
        """Enroll a student in an available course they are not yet enrolled in."""
        with self._lock:
            if not self.is_course_available(course_id):
                logger.debug("Enrollment of %s ignored: course %s not available", student_id, course_id)
                return
            if self.is_student_enrolled(student_id, course_id):
                logger.debug("Enrollment of %s ignored: already enrolled in %s", student_id, course_id)
                return
            enrollment = Enrollment(student_id, course_id)
            self._enrollments.append(enrollment)
        logger.debug("Enrolled %s in %s", student_id, course_id)
        self._publish_event(CatalogEventType.STUDENT_ENROLLED, enrollment.to_dict())

    def unenroll_student(self, student_id: str, course_id: str) -> None:
        """Drop a student from a course."""
        with self._lock:
            remaining = [e for e in self._enrollments if not e.matches(student_id, course_id)]
            changed = len(remaining) != len(self._enrollments)
            self._enrollments = remaining
        if not changed:
            logger.debug("Unenrollment of %s from %s ignored: not enrolled", student_id, course_id)
            return
        logger.debug("Unenrolled %s from %s", student_id, course_id)
        self._publish_event(CatalogEventType.STUDENT_UNENROLLED, {
            'student_id': student_id,
            'course_id': course_id,
        })

    def is_student_enrolled(self, student_id: str, course_id: str) -> bool:
        """Check if a student is enrolled in a course."""
        with self._lock:
            return any(e.matches(student_id, course_id) for e in self._enrollments)

    def get_student_enrollments(self, student_id: str) -> Tuple[Course, ...]:
        """Get a student's courses; removed courses resolve to the empty course."""
        with self._lock:
            return tuple(
                self.get_course(e.course_id) or EMPTY_COURSE
                for e in self._enrollments
                if e.student_id == student_id
            )

    def get_course_enrollments(self, course_id: str) -> Tuple[str, ...]:
        """Get the ids of all students enrolled in a course."""
        with self._lock:
            return tuple(e.student_id for e in self._enrollments if e.course_id == course_id)

    # Snapshots

    @property
    def courses(self) -> Tuple[Course, ...]:
        """Snapshot of all stored courses."""
        with self._lock:
            return tuple(self._courses)

    @property
    def enrollments(self) -> Tuple[Enrollment, ...]:
        """Snapshot of all stored enrollments."""
        with self._lock:
            return tuple(self._enrollments)

    def get_statistics(self) -> Dict[str, Any]:
        """Get catalog statistics."""
        with self._lock:
            course_ids = {c.course_id for c in self._courses}
            orphaned = sum(1 for e in self._enrollments if e.course_id not in course_ids)
            return {
                'total_courses': len(self._courses),
                'total_enrollments': len(self._enrollments),
                'orphaned_enrollments': orphaned,
                'categories': sorted({c.category for c in self._courses}),
                'event_handlers': len(self._event_handlers),
            }

    def _contains_course(self, course: Course) -> bool:
        """Duplicate check used by add_course."""
        if self._settings.duplicate_policy is DuplicatePolicy.COURSE_ID:
            return any(c.course_id == course.course_id for c in self._courses)
        return course in self._courses

    def _publish_event(self, event_type: CatalogEventType, event_data: Dict[str, Any]) -> None:
        """Publish an event to all handlers."""
        with self._lock:
            handlers = list(self._event_handlers)
        if not handlers:
            return

        event = CatalogEvent(event_type=event_type, event_data=event_data)
        for handler in handlers:
            try:
                if handler.can_handle(event_type.value):
                    handler.handle_event(event)
            except Exception:
                logger.exception("Error in event handler %s", handler.__class__.__name__)

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}(courses={len(self._courses)}, "
                f"enrollments={len(self._enrollments)})")


def create_catalog(settings: Optional[CatalogSettings] = None) -> InMemoryCourseCatalog:
    """Create an empty catalog."""
    return InMemoryCourseCatalog(settings)
