"""
Core module containing the entity model, validators and error kinds.
"""

from .entities import *
from .exceptions import *
from .enums import *
from .validators import *

__all__ = [
    # Entities
    "AbstractEntity",
    "User",
    "Admin",
    "Teacher",
    "Student",
    "Course",
    "GradeEntry",

    # Enums
    "Role",

    # Validators
    "MAX_STRING_LENGTH",
    "is_valid_email",
    "is_valid_grade",
    "is_valid_index",
    "is_valid_string",

    # Exceptions
    "LMSException",
    "ValidationError",
    "InvalidIndexError",
    "AuthError",
    "ResourceNotFoundError",
    "BootstrapError",
    "ConfigurationError",
]
