"""
Bootstrap data loaded into a fresh registry at startup.
"""

import structlog

from ..core.entities import Admin, Course, Teacher
from ..core.exceptions import BootstrapError, LMSException
from .registry import Registry

logger = structlog.get_logger(__name__)

SEED_COURSES = [
    ("Mathematics", "teacher1@example.com", ["Introduction to Algebra", "Advanced Calculus"]),
    ("Physics", "teacher2@example.com", ["Newton's Laws", "Thermodynamics"]),
]

SEED_USERS = [
    (Admin, "admin1", "admin1@example.com", "adminpass"),
    (Teacher, "teacher1", "teacher1@example.com", "teacherpass"),
    (Teacher, "teacher2", "teacher2@example.com", "teacherpass"),
]


def seed_registry(registry: Registry) -> Registry:
    """Load the seed courses and users. Any failure aborts startup."""
    try:
        with registry.transaction():
            for name, teacher_email, contents in SEED_COURSES:
                course = Course(name, teacher_email)
                for content in contents:
                    course.add_content(content)
                registry.add_course(course)

            for user_cls, username, email, password in SEED_USERS:
                registry.add_user(user_cls(username, email, password))
    except LMSException as e:
        raise BootstrapError(f"Seed data rejected: {e.message}", details=e.details) from e

    logger.info("registry_seeded", courses=registry.course_count, users=registry.user_count)
    return registry
