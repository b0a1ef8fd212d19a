"""A student, the courses they take and their grade averages."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace

from .course import SEMESTER_COUNT
from .courselist import CourseList
from .validation import ValidationError


def _round2(value: float) -> float:
    """Round to two decimals, halves away from zero."""
    if not math.isfinite(value):
        return value
    return math.copysign(math.floor(abs(value) * 100 + 0.5) / 100, value)


def _weighted_average(courses) -> float:
    credits = sum(c.total_credit for c in courses)
    if credits == 0:
        return math.nan
    return sum(c.point * c.total_credit for c in courses) / credits


@dataclass
class Student:
    """A student with the list of courses they take."""

    id: int = 0
    name: str = ""
    courses: CourseList = field(default_factory=CourseList)

    def course_count(self) -> int:
        return len(self.courses)

    def add_course(self, catalogue: CourseList, course_id: str, semester: int) -> bool:
        """Take a course from the catalogue in the given semester."""
        model = catalogue.find(course_id)
        if model is None:
            return False
        self.courses.add_course(replace(model, semester=semester))
        return True

    def set_point(self, course_id: str, semester: int, point: float) -> bool:
        """Set the grade point of a course taken in the given semester."""
        course = self.courses.find(course_id, semester)
        if course is None:
            return False
        self.courses.update_course(
            course,
            course.name,
            course.total_credit,
            course.lecture_credit,
            course.lab_credit,
            point,
            semester,
        )
        return True

    def semester_gpa(self, semester: int) -> float:
        """Credit-weighted average of one semester, or 0 if it has no courses."""
        courses = self.courses.semester(semester)
        if not courses:
            return 0.0
        return _round2(_weighted_average(courses))

    def cgpa_by_semester(self) -> float:
        """Mean of the GPAs of the semesters that have courses."""
        if not len(self.courses):
            return 0.0
        gpas = [
            self.semester_gpa(index)
            for index in range(SEMESTER_COUNT)
            if self.courses.semester(index)
        ]
        return _round2(sum(gpas) / len(gpas))

    def cgpa_by_course(self) -> float:
        """Credit-weighted average over every course taken."""
        if not len(self.courses):
            return 0.0
        return _round2(_weighted_average(list(self.courses)))

    def __str__(self) -> str:
        return (
            f"ID: {self.id}\nName: {self.name}\n"
            f"{self.course_count()} courses\n\n{self.courses}"
        )


def _parse_student_id(text: str) -> int:
    parts = text.split()
    try:
        return int(parts[0] if parts else "")
    except ValueError:
        raise ValidationError("Invalid input. ID must be a number.") from None


def read_student(prompter) -> Student:
    """Ask for a student's ID and name."""
    prompter.output.write("Enter student information:\n")
    student_id = prompter.ask("ID (123): ", _parse_student_id)
    name = prompter.ask_line("Name (Nguyen Van An): ")
    return Student(id=student_id, name=name)