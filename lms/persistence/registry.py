"""
In-memory registry holding every user and course.
"""

import threading
from contextlib import contextmanager
from typing import Callable, Iterator, List, Optional

import structlog

from ..core.entities import Course, Teacher, User
from ..core.enums import Role
from ..core.exceptions import (
    AuthError, InvalidIndexError, ResourceNotFoundError, ValidationError
)
from ..core.validators import is_valid_index

logger = structlog.get_logger(__name__)


class Registry:
    """Authoritative store of users and courses.

    Course order is insertion order and is the index basis for every
    index-addressed operation. ``get_course`` and ``find_course`` hand out the
    live course object; ``list_courses`` and ``courses_where`` return new
    lists, so reordering or trimming those lists never touches the registry.
    """

    def __init__(self):
        self._courses: List[Course] = []
        self._users: List[User] = []
        self._lock = threading.RLock()

    @contextmanager
    def transaction(self) -> Iterator["Registry"]:
        """Hold the registry lock for a multi-step operation."""
        with self._lock:
            yield self

    # Courses

    def add_course(self, course: Course) -> Course:
        """Append a course. Policy checks belong to the caller."""
        with self._lock:
            self._courses.append(course)
            logger.info("course_added", course_id=course.id, name=course.name,
                        teacher_email=course.teacher_email)
            return course

    def get_course(self, index: int) -> Course:
        """Return the live course at ``index``."""
        with self._lock:
            if not is_valid_index(index, len(self._courses)):
                raise InvalidIndexError(details={'index': index, 'size': len(self._courses)})
            return self._courses[index]

    def find_course(self, course_id: str) -> Course:
        """Return the live course with ``course_id``."""
        with self._lock:
            for course in self._courses:
                if course.id == course_id:
                    return course
            raise ResourceNotFoundError(f"Course {course_id} not found", details={'course_id': course_id})

    def remove_course(self, index: int) -> Course:
        """Remove and return the course at ``index``."""
        with self._lock:
            if not is_valid_index(index, len(self._courses)):
                raise InvalidIndexError(details={'index': index, 'size': len(self._courses)})
            course = self._courses.pop(index)
            logger.info("course_removed", course_id=course.id, name=course.name)
            return course

    def list_courses(self) -> List[Course]:
        with self._lock:
            return list(self._courses)

    def courses_where(self, predicate: Callable[[Course], bool]) -> List[Course]:
        """Courses matching ``predicate``, in registry order."""
        with self._lock:
            return [course for course in self._courses if predicate(course)]

    def teacher_has_course(self, teacher_email: str) -> bool:
        with self._lock:
            return any(course.teacher_email == teacher_email for course in self._courses)

    @property
    def course_count(self) -> int:
        return len(self._courses)

    # Users

    def add_user(self, user: User) -> User:
        """Register a user; emails are unique across all roles."""
        with self._lock:
            if self.find_user(user.email) is not None:
                raise ValidationError("User with this email already exists",
                                      error_code="duplicate_user",
                                      details={'email': user.email})
            self._users.append(user)
            logger.info("user_added", email=user.email, role=user.role.value)
            return user

    def find_user(self, email: str) -> Optional[User]:
        with self._lock:
            for user in self._users:
                if user.email == email:
                    return user
            return None

    def find_teacher(self, email: str) -> Optional[Teacher]:
        user = self.find_user(email)
        if user is not None and user.role is Role.TEACHER:
            return user
        return None

    def list_users(self, role: Optional[Role] = None) -> List[User]:
        with self._lock:
            if role is None:
                return list(self._users)
            return [user for user in self._users if user.role is role]

    @property
    def user_count(self) -> int:
        return len(self._users)

    def authenticate(self, email: str, password: str) -> User:
        """Return the user matching both email and password."""
        with self._lock:
            user = self.find_user(email)
            if user is None or not user.check_password(password):
                raise AuthError("Invalid login credentials", details={'email': email})
            return user
