"""A single course and its text representations."""

from __future__ import annotations

from dataclasses import dataclass

SEMESTER_COUNT = 6


def _format_number(value: float) -> str:
    return format(value, "g")


@dataclass
class Course:
    """A course with its credits, grade point and zero-based semester index."""

    id: str = ""
    name: str = ""
    total_credit: int = 0
    lecture_credit: int = 0
    lab_credit: int = 0
    point: float = 0.0
    semester: int = 0

    def to_csv(self) -> str:
        """Return the course as one comma-separated record."""
        return ",".join(
            [
                self.id,
                self.name,
                str(self.total_credit),
                str(self.lecture_credit),
                str(self.lab_credit),
                _format_number(self.point),
                str(self.semester),
            ]
        )

    def format_row(self) -> str:
        """Return the course as one row of the course table."""
        point = _format_number(self.point)
        return (
            f"| {self.id} | "
            f"{self.name:<38} | "
            f"{self.total_credit:<10} | "
            f"{self.lecture_credit:<12} | "
            f"{self.lab_credit:<8} | "
            f"{point:<5} | "
            f"{self.semester + 1:<8} | "
        )


def read_course(prompter) -> Course:
    """Ask for every field of a course and return it."""
    course_id = prompter.ask_course_id()
    name = prompter.ask_line("Course name: ")
    total = prompter.ask_total_credit()
    lab = prompter.ask_lecture_credit(total)
    point = prompter.ask_point()
    semester = prompter.ask_semester()
    return Course(
        id=course_id,
        name=name,
        total_credit=total,
        lecture_credit=total - lab,
        lab_credit=lab,
        point=point,
        semester=semester,
    )