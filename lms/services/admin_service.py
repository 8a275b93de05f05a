"""
Administrator operations: course management, enrollment and reporting.
"""

from typing import List, Optional

from ..core.entities import Course, Student, Teacher
from ..core.enums import Role
from ..core.exceptions import ResourceNotFoundError, ValidationError
from ..core.validators import is_valid_email
from .base import RoleService
from .results import OperationResult, TeacherRegistration
from .schemas import CourseDetail, CourseSummary, RegistryReport, UserSummary, CourseReport


class AdminService(RoleService):
    """Operations over the whole registry. Indices are registry positions."""

    role = Role.ADMIN

    def list_courses(self) -> List[CourseSummary]:
        return self._view(self._registry.list_courses())

    def list_users(self) -> List[UserSummary]:
        return [UserSummary.from_user(user) for user in self._registry.list_users()]

    def register_teacher(self, username: str, email: str, password: str) -> OperationResult:
        def action():
            teacher = self._registry.add_user(Teacher(username, email, password))
            return OperationResult.ok(
                f"Teacher registered successfully: {teacher.username} ({teacher.email})",
                data=UserSummary.from_user(teacher),
            )
        return self._run("register_teacher", action)

    def add_course(self, name: str, teacher_email: str,
                   register_teacher: Optional[TeacherRegistration] = None) -> OperationResult:
        """Create a course taught by ``teacher_email``.

        The email must belong to a registered teacher. When nobody owns it and
        ``register_teacher`` is given, the teacher is registered as part of the
        same operation. A teacher already assigned to a course is refused.
        Nothing is written unless every check passes.
        """
        def action():
            course = Course(name, teacher_email)

            new_teacher = None
            if self._registry.find_teacher(teacher_email) is None:
                if self._registry.find_user(teacher_email) is not None:
                    raise ValidationError("The email does not belong to a teacher",
                                          error_code="not_a_teacher",
                                          details={'teacher_email': teacher_email})
                if register_teacher is None:
                    raise ResourceNotFoundError(
                        "The email does not belong to a registered teacher",
                        error_code="teacher_not_found",
                        details={'teacher_email': teacher_email},
                    )
                new_teacher = Teacher(register_teacher.username, teacher_email, register_teacher.password)

            if self._registry.teacher_has_course(teacher_email):
                raise ValidationError("Teacher is already assigned to another course",
                                      error_code="teacher_already_assigned",
                                      details={'teacher_email': teacher_email})

            if new_teacher is not None:
                self._registry.add_user(new_teacher)
            self._registry.add_course(course)
            return OperationResult.ok("Course added successfully.", data=CourseDetail.from_course(course))
        return self._run("add_course", action)

    def delete_course(self, index: int) -> OperationResult:
        def action():
            course = self._registry.remove_course(index)
            return OperationResult.ok(f"Successfully deleted course: {course.name}",
                                      data=CourseDetail.from_course(course))
        return self._run("delete_course", action)

    def add_content(self, course_index: int, content: str) -> OperationResult:
        def action():
            course = self._registry.get_course(course_index)
            course.add_content(content)
            return OperationResult.ok("Content added successfully.", data=CourseDetail.from_course(course))
        return self._run("add_content", action)

    def remove_content(self, course_index: int, content_index: int) -> OperationResult:
        def action():
            course = self._registry.get_course(course_index)
            if not course.contents:
                raise ValidationError("There is no content to remove.", error_code="no_content")
            removed = course.remove_content(content_index)
            return OperationResult.ok(f"Content removed successfully: {removed}",
                                      data=CourseDetail.from_course(course))
        return self._run("remove_content", action)

    def enroll_student(self, course_index: int, email: str,
                       password: Optional[str] = None) -> OperationResult:
        """Enroll ``email`` in a course, creating the student account if unseen."""
        def action():
            course = self._registry.get_course(course_index)
            if not is_valid_email(email):
                raise ValidationError("Invalid email format", details={'email': email})

            new_student = None
            user = self._registry.find_user(email)
            if user is None:
                if not password:
                    raise ValidationError("A password is required to create a student account",
                                          error_code="password_required")
                new_student = Student.from_email(email, password)
            elif user.role is not Role.STUDENT:
                raise ValidationError("The email belongs to a non-student account",
                                      error_code="not_a_student", details={'email': email})

            course.enroll_student(email)
            if new_student is not None:
                self._registry.add_user(new_student)
                return OperationResult.ok("Student enrolled successfully and account created.",
                                          data=UserSummary.from_user(new_student))
            return OperationResult.ok("Student enrolled successfully.", data=UserSummary.from_user(user))
        return self._run("enroll_student", action)

    def remove_student(self, course_index: int, email: str) -> OperationResult:
        def action():
            course = self._registry.get_course(course_index)
            if not course.students:
                raise ValidationError("There is no student here.", error_code="no_students")
            course.remove_student(email)
            return OperationResult.ok("Student removed successfully.")
        return self._run("remove_student", action)

    def report(self) -> RegistryReport:
        with self._registry.transaction():
            return RegistryReport(
                courses=[CourseReport.from_course(course) for course in self._registry.list_courses()],
                users=self.list_users(),
            )
