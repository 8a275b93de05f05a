"""
Core entities for the LMS registry: the user hierarchy and courses.
"""

import uuid
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any, Dict, List, NamedTuple, Optional, Tuple

from .enums import Role
from .exceptions import ValidationError, InvalidIndexError
from .validators import is_valid_email, is_valid_grade, is_valid_index, is_valid_string


class AbstractEntity(ABC):
    """Base abstract entity with universal ID and versioning."""

    def __init__(self, entity_id: Optional[str] = None):
        self._id = entity_id or str(uuid.uuid4())
        self._created_at = datetime.now(timezone.utc)
        self._updated_at = self._created_at
        self._version = 1

    @property
    def id(self) -> str:
        """Get the entity ID."""
        return self._id

    @property
    def version(self) -> int:
        """Get current version."""
        return self._version

    def touch(self) -> None:
        """Record a mutation."""
        self._updated_at = datetime.now(timezone.utc)
        self._version += 1

    def to_dict(self) -> Dict[str, Any]:
        """Convert entity to dictionary."""
        return {
            'id': self._id,
            'created_at': self._created_at.isoformat(),
            'updated_at': self._updated_at.isoformat(),
            'version': self._version,
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self._id}, version={self._version})"


class User(AbstractEntity):
    """Abstract base class for everyone who can log in."""

    def __init__(self, username: str, email: str, password: str, **kwargs):
        super().__init__(**kwargs)
        if not is_valid_email(email):
            raise ValidationError("Invalid email", details={'email': email})
        self._username = username
        self._email = email
        self._password = password

    @property
    @abstractmethod
    def role(self) -> Role:
        """Role granted by this user variant."""

    @property
    def username(self) -> str:
        return self._username

    @property
    def email(self) -> str:
        return self._email

    def check_password(self, password: str) -> bool:
        """Plaintext comparison; no hashing in this registry."""
        return self._password == password

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(email={self._email})"


class Admin(User):
    """Administrator: manages courses, enrollments and reports."""

    @property
    def role(self) -> Role:
        return Role.ADMIN


class Teacher(User):
    """Teacher: works on the courses assigned to their email."""

    @property
    def role(self) -> Role:
        return Role.TEACHER


class Student(User):
    """Student: enrolls in courses and reads grades."""

    @property
    def role(self) -> Role:
        return Role.STUDENT

    @classmethod
    def from_email(cls, email: str, password: str) -> "Student":
        """Create a student whose username is the local part of the email."""
        username = email.split("@", 1)[0]
        return cls(username, email, password)


class GradeEntry(NamedTuple):
    """Immutable (student email, grade) pair."""
    student_email: str
    grade: int


class Course(AbstractEntity):
    """Course with ordered contents, enrolled students and grade entries."""

    def __init__(self, name: str, teacher_email: str, **kwargs):
        if not is_valid_string(name):
            raise ValidationError("Invalid course name", details={'name': name})
        if not is_valid_email(teacher_email):
            raise ValidationError("Invalid teacher email", details={'teacher_email': teacher_email})
        super().__init__(**kwargs)
        self._name = name
        self._teacher_email = teacher_email
        self._contents: List[str] = []
        self._students: List[str] = []
        self._grades: List[GradeEntry] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def teacher_email(self) -> str:
        return self._teacher_email

    @property
    def contents(self) -> Tuple[str, ...]:
        return tuple(self._contents)

    @property
    def students(self) -> Tuple[str, ...]:
        return tuple(self._students)

    @property
    def grades(self) -> Tuple[GradeEntry, ...]:
        return tuple(self._grades)

    def add_content(self, content: str) -> None:
        """Append a content item."""
        if not is_valid_string(content):
            raise ValidationError("Invalid content")
        self._contents.append(content)
        self.touch()

    def remove_content(self, index: int) -> str:
        """Remove the content item at ``index``; later items shift down."""
        if not is_valid_index(index, len(self._contents)):
            raise InvalidIndexError("Invalid content index!", details={'index': index})
        removed = self._contents.pop(index)
        self.touch()
        return removed

    def add_grade(self, student_email: str, grade: int) -> GradeEntry:
        """Append a grade entry.

        Enrollment is not checked here; callers that need it check
        ``is_enrolled`` first. Earlier entries for the same student are kept.
        """
        if not is_valid_email(student_email):
            raise ValidationError("Invalid student email")
        if not is_valid_grade(grade):
            raise ValidationError("Invalid grade", details={'grade': grade})
        entry = GradeEntry(student_email, grade)
        self._grades.append(entry)
        self.touch()
        return entry

    def first_grade_for(self, student_email: str) -> Optional[GradeEntry]:
        """First recorded grade for a student, or None."""
        for entry in self._grades:
            if entry.student_email == student_email:
                return entry
        return None

    def enroll_student(self, student_email: str) -> None:
        """Enroll a student by email."""
        if not is_valid_email(student_email):
            raise ValidationError("Invalid student email")
        if student_email in self._students:
            raise ValidationError("Student already enrolled", error_code="already_enrolled")
        self._students.append(student_email)
        self.touch()

    def remove_student(self, student_email: str) -> None:
        """Remove a student by email."""
        if student_email not in self._students:
            raise ValidationError("Student not found", error_code="student_not_found")
        self._students.remove(student_email)
        self.touch()

    def is_enrolled(self, student_email: str) -> bool:
        return student_email in self._students

    def to_dict(self) -> Dict[str, Any]:
        """Convert course to dictionary."""
        base_dict = super().to_dict()
        base_dict.update({
            'name': self._name,
            'teacher_email': self._teacher_email,
            'contents': list(self._contents),
            'students': list(self._students),
            'grades': [entry._asdict() for entry in self._grades],
        })
        return base_dict

    def __repr__(self) -> str:
        return f"Course(id={self._id}, name={self._name!r}, teacher={self._teacher_email})"
