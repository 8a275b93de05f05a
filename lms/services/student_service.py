"""
Student operations: enrolled courses, grades and self-enrollment.
"""

from typing import List

from ..core.entities import Course
from ..core.enums import Role
from .base import RoleService
from .results import OperationResult
from .schemas import CourseDetail, CourseSummary, StudentGrade


class StudentService(RoleService):
    """Every index here is a position in the caller's enrolled or available list."""

    role = Role.STUDENT

    def _enrolled(self) -> List[Course]:
        return self._registry.courses_where(lambda course: course.is_enrolled(self.email))

    def _available(self) -> List[Course]:
        return self._registry.courses_where(lambda course: not course.is_enrolled(self.email))

    def _grade_for(self, course: Course) -> StudentGrade:
        # First entry wins; later entries for the same student are history.
        entry = course.first_grade_for(self.email)
        return StudentGrade(course_id=course.id, course_name=course.name,
                            grade=entry.grade if entry is not None else None)

    def enrolled_courses(self) -> List[CourseSummary]:
        return self._view(self._enrolled())

    def available_courses(self) -> List[CourseSummary]:
        return self._view(self._available())

    def view_course(self, index: int) -> OperationResult:
        def action():
            course = self._resolve(self._enrolled(), index)
            message = (f"Selected course: {course.name}" if course.contents
                       else "No content available for this course.")
            return OperationResult.ok(message, data=CourseDetail.from_course(course))
        return self._run("view_course", action)

    def view_grade(self, index: int) -> OperationResult:
        def action():
            grade = self._grade_for(self._resolve(self._enrolled(), index))
            if grade.grade is None:
                return OperationResult.ok("No grade available for this course.", data=grade)
            return OperationResult.ok(f"Your Grade in {grade.course_name}: {grade.grade}%", data=grade)
        return self._run("view_grade", action)

    def grades(self) -> List[StudentGrade]:
        with self._registry.transaction():
            return [self._grade_for(course) for course in self._enrolled()]

    def enroll(self, index: int) -> OperationResult:
        """Enroll in the course at ``index`` of ``available_courses()``."""
        def action():
            course = self._resolve(self._available(), index)
            course.enroll_student(self.email)
            return OperationResult.ok(f"Successfully enrolled in the course: {course.name}",
                                      data=CourseDetail.from_course(course))
        return self._run("enroll", action)
