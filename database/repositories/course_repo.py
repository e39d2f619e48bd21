"""Course table: courses and their holes, keyed by course id."""

import logging
from typing import Dict, List, Optional

from models import Course, Hole
from database.exceptions import DuplicateError, NotFoundError

logger = logging.getLogger(__name__)


class CourseRepository:
    """In-memory CRUD for courses."""

    def __init__(self):
        self._courses: Dict[str, Course] = {}

    # ================================================================
    # Read
    # ================================================================

    def get_course(self, course_id: str) -> Optional[Course]:
        return self._courses.get(course_id)

    def find_course_by_name(self, name: str, location: Optional[str] = None) -> Optional[Course]:
        """Case-insensitive name match, narrowed by location when given."""
        for course in self._courses.values():
            if course.name.lower() != name.lower():
                continue
            if location and (course.location or "").lower() != location.lower():
                continue
            return course
        return None

    def list_courses(self, *, limit: int = 50, offset: int = 0) -> List[Course]:
        courses = sorted(self._courses.values(), key=lambda c: c.name.lower())
        return courses[offset:offset + limit]

    def get_hole(self, course_id: str, hole_number: int) -> Optional[Hole]:
        course = self.get_course(course_id)
        return course.get_hole(hole_number) if course else None

    # ================================================================
    # Create / Update
    # ================================================================

    def create_course(self, course: Course) -> Course:
        if course.id in self._courses:
            raise DuplicateError(f"Course {course.id} already exists")
        if self.find_course_by_name(course.name, course.location):
            raise DuplicateError(f"Course '{course.name}' already exists")
        self._courses[course.id] = course
        logger.debug("created course %s (%s)", course.id, course.name)
        return course

    def update_hole(self, course_id: str, hole: Hole) -> Course:
        """Replace or add a hole on a course."""
        course = self.get_course(course_id)
        if course is None:
            raise NotFoundError(f"Course {course_id} not found")
        others = [h for h in course.holes if h.number != hole.number]
        course.holes = others + [hole]
        return course

    # ================================================================
    # Delete
    # ================================================================

    def delete_course(self, course_id: str) -> bool:
        return self._courses.pop(course_id, None) is not None
