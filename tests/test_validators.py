import pytest

from lms.core.validators import (
    MAX_STRING_LENGTH, is_valid_email, is_valid_grade, is_valid_index, is_valid_string
)


@pytest.mark.parametrize("email", [
    "a@b.co",
    "teacher1@example.com",
    "first.last@mail.example.org",
    "x@y.z",
])
def test_valid_emails(email):
    assert is_valid_email(email)


@pytest.mark.parametrize("email", [
    "not-an-email",
    "@example.com",
    "user@example.",
    "user.name@example",
    "user@",
    "",
    None,
    42,
])
def test_invalid_emails(email):
    assert not is_valid_email(email)


def test_email_dot_must_follow_at():
    """Only the last dot counts and it must come after the '@'"""
    assert not is_valid_email("a.b@c")
    assert is_valid_email("a.b@c.d")


def test_string_length_bounds():
    assert not is_valid_string("")
    assert is_valid_string("x")
    assert is_valid_string("x" * MAX_STRING_LENGTH)
    assert not is_valid_string("x" * (MAX_STRING_LENGTH + 1))
    assert not is_valid_string(None)


def test_grade_bounds():
    assert is_valid_grade(0)
    assert is_valid_grade(100)
    assert not is_valid_grade(-1)
    assert not is_valid_grade(101)
    assert not is_valid_grade(True)
    assert not is_valid_grade(85.5)


def test_index_bounds():
    assert is_valid_index(0, 1)
    assert is_valid_index(2, 3)
    assert not is_valid_index(3, 3)
    assert not is_valid_index(-1, 3)
    assert not is_valid_index(0, 0)
    assert not is_valid_index("0", 3)
