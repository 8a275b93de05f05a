"""
Stateless predicates used at every mutation boundary.
"""

from typing import Any

MAX_STRING_LENGTH = 100
MIN_GRADE = 0
MAX_GRADE = 100


def is_valid_email(email: Any) -> bool:
    """Basic shape check: 'local@domain.tld'."""
    if not isinstance(email, str):
        return False
    at_pos = email.find('@')
    dot_pos = email.rfind('.')
    return (at_pos > 0 and dot_pos != -1 and
            at_pos < dot_pos and dot_pos < len(email) - 1)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_valid_grade(grade: Any) -> bool:
    return _is_int(grade) and MIN_GRADE <= grade <= MAX_GRADE


def is_valid_index(index: Any, size: int) -> bool:
    return _is_int(index) and 0 <= index < size


def is_valid_string(value: Any) -> bool:
    return isinstance(value, str) and 1 <= len(value) <= MAX_STRING_LENGTH
