import io
import math

import pytest

from cgpacalc.course import Course
from cgpacalc.courselist import CourseList
from cgpacalc.student import Student, read_student
from cgpacalc.validation import Prompter


def course(course_id, semester, point, total):
    return Course(course_id, f"Course {course_id}", total, total, 0, point, semester)


def student_with(*courses):
    student = Student(123, "An")
    for item in courses:
        student.courses.add_course(item)
    return student


def test_empty_student_averages_are_zero():
    student = Student()
    assert student.semester_gpa(0) == 0
    assert student.cgpa_by_semester() == 0
    assert student.cgpa_by_course() == 0
    assert student.course_count() == 0


def test_equal_points_give_that_point():
    student = student_with(course("IT001", 0, 7.0, 4), course("IT002", 0, 7.0, 2))
    assert student.semester_gpa(0) == 7.0


def test_semester_gpa_rounds_half_up():
    student = student_with(course("IT001", 0, 8.0, 1), course("IT002", 0, 7.0, 7))
    assert student.semester_gpa(0) == 7.13


def test_zero_credit_semester_is_nan():
    student = student_with(course("IT001", 0, 8.0, 0))
    result = student.semester_gpa(0)
    assert math.isnan(result) is True
    assert str(result) == "nan"


def test_cgpa_by_semester_and_by_course_differ():
    student = student_with(course("IT001", 0, 8.0, 4), course("MA003", 1, 6.0, 2))
    assert student.cgpa_by_semester() == 7.0
    assert student.cgpa_by_course() == pytest.approx(7.33)


def test_cgpas_agree_with_single_semester():
    student = student_with(course("IT001", 2, 9.0, 3), course("IT002", 2, 5.0, 1))
    assert student.cgpa_by_course() == student.cgpa_by_semester()
    assert student.cgpa_by_course() == student.semester_gpa(2)


def test_add_course_from_catalogue():
    catalogue = CourseList()
    catalogue.add_course(course("IT001", 0, 0.0, 4))
    student = Student()
    assert student.add_course(catalogue, "IT001", 3) is True
    assert student.course_count() == 1
    taken = student.courses.find("IT001", 3)
    assert taken.name == "Course IT001"
    assert catalogue.find("IT001").semester == 0


def test_add_unknown_course_fails():
    student = Student()
    assert student.add_course(CourseList(), "IT001", 0) is False
    assert student.course_count() == 0


def test_set_point():
    student = student_with(course("IT001", 1, 0.0, 4))
    assert student.set_point("IT001", 1, 9.0) is True
    assert student.courses.find("IT001").point == 9
    assert student.set_point("IT001", 0, 9.0) is False


def test_str_shows_header_and_table():
    student = student_with(course("IT001", 0, 8.0, 4))
    text = str(student)
    assert text.startswith("ID: 123\nName: An\n1 courses\n\n")
    assert text.endswith(str(student.courses))


def test_read_student_reasks_for_id():
    output = io.StringIO()
    answers = iter(["abc", "123", "Nguyen Van An"])
    student = read_student(Prompter(input_fn=answers.__next__, output=output))
    assert student.id == 123
    assert student.name == "Nguyen Van An"
    assert output.getvalue().startswith("Enter student information:\n")
    assert "Invalid input. ID must be a number." in output.getvalue()