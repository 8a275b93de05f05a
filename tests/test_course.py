import pytest

from lms.core.entities import Admin, Course, GradeEntry, Student, Teacher
from lms.core.enums import Role
from lms.core.exceptions import InvalidIndexError, ValidationError


def test_new_course_starts_empty(course):
    assert course.name == "Chemistry"
    assert course.teacher_email == "teacher3@example.com"
    assert course.contents == ()
    assert course.students == ()
    assert course.grades == ()
    assert course.version == 1


def test_invalid_teacher_email_rejected_at_construction():
    with pytest.raises(ValidationError) as exc_info:
        Course("Biology", "not-an-email")
    assert exc_info.value.message == "Invalid teacher email"


@pytest.mark.parametrize("name", ["", "x" * 101])
def test_invalid_name_rejected_at_construction(name):
    with pytest.raises(ValidationError):
        Course(name, "teacher3@example.com")


def test_content_keeps_insertion_order(course):
    course.add_content("Atoms")
    course.add_content("Bonds")
    course.add_content("Reactions")
    assert course.contents == ("Atoms", "Bonds", "Reactions")

    assert course.remove_content(1) == "Bonds"
    assert course.contents == ("Atoms", "Reactions")


def test_invalid_content_rejected(course):
    with pytest.raises(ValidationError):
        course.add_content("")
    assert course.contents == ()


def test_remove_content_out_of_range(course):
    course.add_content("Atoms")
    with pytest.raises(IndexError):
        course.remove_content(1)
    with pytest.raises(InvalidIndexError):
        course.remove_content(-1)
    assert course.contents == ("Atoms",)


def test_enroll_twice_fails(course):
    course.enroll_student("alice@example.com")
    with pytest.raises(ValidationError) as exc_info:
        course.enroll_student("alice@example.com")
    assert exc_info.value.error_code == "already_enrolled"
    assert course.students == ("alice@example.com",)


def test_enroll_invalid_email(course):
    with pytest.raises(ValidationError):
        course.enroll_student("alice")
    assert course.students == ()


def test_remove_missing_student(course):
    course.enroll_student("alice@example.com")
    with pytest.raises(ValidationError) as exc_info:
        course.remove_student("bob@example.com")
    assert exc_info.value.message == "Student not found"
    assert course.students == ("alice@example.com",)


def test_remove_student(course):
    course.enroll_student("alice@example.com")
    course.enroll_student("bob@example.com")
    course.remove_student("alice@example.com")
    assert course.students == ("bob@example.com",)
    assert not course.is_enrolled("alice@example.com")


def test_grade_out_of_range_rejected(course):
    with pytest.raises(ValidationError):
        course.add_grade("a@b.co", 150)
    assert course.grades == ()


def test_add_grade_appends_one_entry(course):
    before = len(course.grades)
    entry = course.add_grade("a@b.co", 85)
    assert len(course.grades) == before + 1
    assert course.grades[-1] == ("a@b.co", 85)
    assert entry == GradeEntry("a@b.co", 85)


def test_grade_does_not_require_enrollment(course):
    course.add_grade("stranger@example.com", 50)
    assert course.grades == (GradeEntry("stranger@example.com", 50),)


def test_grades_append_and_first_match_wins(course):
    course.add_grade("a@b.co", 60)
    course.add_grade("a@b.co", 90)
    assert len(course.grades) == 2
    assert course.first_grade_for("a@b.co").grade == 60
    assert course.first_grade_for("nobody@b.co") is None


def test_accessors_are_copies(course):
    course.add_content("Atoms")
    contents = list(course.contents)
    contents.append("Injected")
    assert course.contents == ("Atoms",)


def test_mutation_bumps_version(course):
    course.add_content("Atoms")
    course.enroll_student("a@b.co")
    assert course.version == 3


def test_to_dict(course):
    course.add_content("Atoms")
    course.enroll_student("a@b.co")
    course.add_grade("a@b.co", 77)
    data = course.to_dict()
    assert data["name"] == "Chemistry"
    assert data["contents"] == ["Atoms"]
    assert data["students"] == ["a@b.co"]
    assert data["grades"] == [{"student_email": "a@b.co", "grade": 77}]


def test_user_roles_are_structural():
    assert Admin("admin", "admin@example.com", "pw").role is Role.ADMIN
    assert Teacher("t", "t@example.com", "pw").role is Role.TEACHER
    assert Student("s", "s@example.com", "pw").role is Role.STUDENT


def test_student_username_from_email():
    student = Student.from_email("alice@example.com", "pw")
    assert student.username == "alice"
    assert student.check_password("pw")
    assert not student.check_password("PW")


def test_user_rejects_invalid_email():
    with pytest.raises(ValidationError):
        Teacher("t", "nope", "pw")
