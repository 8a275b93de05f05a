import pytest

from lms.services import StudentService


@pytest.fixture
def alice(admin, platform):
    admin.enroll_student(0, "alice@example.com", "alicepass")
    return platform.login("alice@example.com", "alicepass")


def test_student_session_type(alice):
    assert isinstance(alice, StudentService)


def test_enrolled_and_available_courses(alice):
    assert [c.name for c in alice.enrolled_courses()] == ["Mathematics"]
    assert [c.name for c in alice.available_courses()] == ["Physics"]


def test_view_course(alice):
    result = alice.view_course(0)
    assert result.success
    assert result.data.name == "Mathematics"
    assert result.data.contents == ["Introduction to Algebra", "Advanced Calculus"]


def test_view_course_out_of_range(alice):
    assert alice.view_course(1).error_code == "invalid_index"


def test_no_grade_yet(alice):
    result = alice.view_grade(0)
    assert result.success
    assert result.message == "No grade available for this course."
    assert result.data.grade is None


def test_first_grade_wins(alice, teacher1):
    teacher1.add_grade(0, "alice@example.com", 72)
    teacher1.add_grade(0, "alice@example.com", 95)
    result = alice.view_grade(0)
    assert result.data.grade == 72
    assert result.message == "Your Grade in Mathematics: 72%"


def test_self_enroll(alice, platform):
    result = alice.enroll(0)
    assert result.success
    assert result.message == "Successfully enrolled in the course: Physics"
    assert platform.registry.get_course(1).is_enrolled("alice@example.com")
    assert alice.available_courses() == []
    assert alice.enroll(0).error_code == "invalid_index"


def test_grades_per_course(alice, teacher1):
    alice.enroll(0)
    teacher1.add_grade(0, "alice@example.com", 88)
    grades = {g.course_name: g.grade for g in alice.grades()}
    assert grades == {"Mathematics": 88, "Physics": None}


def test_student_with_no_courses(admin, platform):
    admin.enroll_student(0, "bob@example.com", "bobpass")
    admin.remove_student(0, "bob@example.com")
    bob = platform.login("bob@example.com", "bobpass")
    assert bob.enrolled_courses() == []
    assert bob.grades() == []
    assert bob.view_grade(0).error_code == "invalid_index"
