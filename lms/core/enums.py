"""
Enumerations for the LMS registry.
"""

from enum import Enum


class Role(Enum):
    """Roles a user can hold. Fixed by the concrete user class."""
    ADMIN = "admin"
    TEACHER = "teacher"
    STUDENT = "student"
