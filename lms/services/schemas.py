"""
Pydantic models for the views and reports handed back to callers.
"""

from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, Field

from ..core.entities import Course, GradeEntry, User


class UserSummary(BaseModel):
    username: str
    email: str
    role: str

    @classmethod
    def from_user(cls, user: User) -> "UserSummary":
        return cls(username=user.username, email=user.email, role=user.role.value)


class CourseSummary(BaseModel):
    """One line of a course listing.

    ``index`` is the position within the listing it came from, which is not
    necessarily the position in the registry. ``id`` is stable.
    """
    index: int = Field(..., ge=0)
    id: str
    name: str
    teacher_email: str

    @classmethod
    def from_course(cls, index: int, course: Course) -> "CourseSummary":
        return cls(index=index, id=course.id, name=course.name, teacher_email=course.teacher_email)


class CourseDetail(BaseModel):
    id: str
    name: str
    teacher_email: str
    contents: List[str] = []

    @classmethod
    def from_course(cls, course: Course) -> "CourseDetail":
        return cls(id=course.id, name=course.name, teacher_email=course.teacher_email,
                   contents=list(course.contents))


class GradeView(BaseModel):
    student_email: str
    grade: int = Field(..., ge=0, le=100)

    @classmethod
    def from_entry(cls, entry: GradeEntry) -> "GradeView":
        return cls(student_email=entry.student_email, grade=entry.grade)


class CourseReport(BaseModel):
    id: str
    name: str
    teacher_email: str
    contents: List[str] = []
    students: List[str] = []
    grades: List[GradeView] = []

    @classmethod
    def from_course(cls, course: Course) -> "CourseReport":
        return cls(
            id=course.id,
            name=course.name,
            teacher_email=course.teacher_email,
            contents=list(course.contents),
            students=list(course.students),
            grades=[GradeView.from_entry(entry) for entry in course.grades],
        )


class RegistryReport(BaseModel):
    generated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    courses: List[CourseReport] = []
    users: List[UserSummary] = []


class TeacherReport(BaseModel):
    teacher_email: str
    generated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    courses: List[CourseReport] = []


class StudentGrade(BaseModel):
    course_id: str
    course_name: str
    grade: Optional[int] = None
