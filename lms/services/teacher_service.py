"""
Teacher operations, restricted to the caller's own courses.
"""

from typing import List

from ..core.entities import Course
from ..core.enums import Role
from ..core.exceptions import ValidationError
from ..core.validators import is_valid_email
from .base import RoleService
from .results import OperationResult
from .schemas import CourseDetail, CourseReport, CourseSummary, GradeView, TeacherReport


class TeacherService(RoleService):
    """Every index here is a position in ``my_courses()``, not the registry."""

    role = Role.TEACHER

    def _own_courses(self) -> List[Course]:
        return self._registry.courses_where(lambda course: course.teacher_email == self.email)

    def my_courses(self) -> List[CourseSummary]:
        return self._view(self._own_courses())

    def view_course(self, index: int) -> OperationResult:
        def action():
            course = self._resolve(self._own_courses(), index)
            message = (f"Viewing course: {course.name}" if course.contents
                       else "No content available for this course.")
            return OperationResult.ok(message, data=CourseDetail.from_course(course))
        return self._run("view_course", action)

    def add_content(self, index: int, content: str) -> OperationResult:
        def action():
            course = self._resolve(self._own_courses(), index)
            course.add_content(content)
            return OperationResult.ok(f"Content added to the course: {course.name}",
                                      data=CourseDetail.from_course(course))
        return self._run("add_content", action)

    def add_grade(self, index: int, student_email: str, grade: int) -> OperationResult:
        """Grade a student; only students enrolled in the course qualify."""
        def action():
            course = self._resolve(self._own_courses(), index)
            if not is_valid_email(student_email):
                raise ValidationError("Invalid email format", details={'email': student_email})
            if not course.is_enrolled(student_email):
                raise ValidationError("Student is not enrolled in this course.",
                                      error_code="not_enrolled",
                                      details={'email': student_email, 'course_id': course.id})
            entry = course.add_grade(student_email, grade)
            return OperationResult.ok(f"Grade added successfully for student: {student_email}",
                                      data=GradeView.from_entry(entry))
        return self._run("add_grade", action)

    def assigned_students(self, index: int) -> OperationResult:
        def action():
            course = self._resolve(self._own_courses(), index)
            students = list(course.students)
            if not students:
                return OperationResult.ok("There are no students enrolled in this course.", data=[])
            return OperationResult.ok(f"Course: {course.name} has {len(students)} students.", data=students)
        return self._run("assigned_students", action)

    def report(self) -> TeacherReport:
        with self._registry.transaction():
            return TeacherReport(
                teacher_email=self.email,
                courses=[CourseReport.from_course(course) for course in self._own_courses()],
            )
