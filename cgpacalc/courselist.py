"""Courses grouped by semester."""

from __future__ import annotations

import re
from dataclasses import replace
from typing import Iterator, List, Optional, Tuple

from .course import SEMESTER_COUNT, Course

_RULE = "-" * 108
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _leading_int(token: str) -> int:
    match = _LEADING_INT.match(token)
    if match is None:
        raise ValueError(f"not a number: {token!r}")
    return int(match.group(1))


class CourseList:
    """Courses held per semester; the newest course of a semester comes first."""

    def __init__(self) -> None:
        self._semesters: List[List[Course]] = [[] for _ in range(SEMESTER_COUNT)]

    def _bucket(self, index: int) -> List[Course]:
        if not 0 <= index < SEMESTER_COUNT:
            raise IndexError(f"semester index {index} out of range")
        return self._semesters[index]

    def copy(self) -> "CourseList":
        """Return an independent copy holding copies of every course."""
        duplicate = CourseList()
        duplicate._semesters = [[replace(c) for c in bucket] for bucket in self._semesters]
        return duplicate

    def add_course(self, course: Course) -> None:
        """Put a course at the front of its semester."""
        self._bucket(course.semester).insert(0, course)

    def semester(self, index: int) -> Tuple[Course, ...]:
        """Return the courses of one semester, newest first."""
        return tuple(self._bucket(index))

    def __iter__(self) -> Iterator[Course]:
        for bucket in self._semesters:
            yield from bucket

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._semesters)

    def find(self, course_id: str, semester: Optional[int] = None) -> Optional[Course]:
        """Return the first course with this ID, optionally within one semester."""
        candidates = self if semester is None else self._bucket(semester)
        return next((c for c in candidates if c.id == course_id), None)

    def delete_course(self, course_id: str, semester: Optional[int] = None) -> bool:
        """Remove the first course with this ID; return whether one was removed."""
        target = self.find(course_id, semester)
        if target is None:
            return False
        index = target.semester if semester is None else semester
        if not 0 <= index < SEMESTER_COUNT:
            return False
        bucket = self._semesters[index]
        for position, course in enumerate(bucket):
            if course is target:
                del bucket[position]
                return True
        return False

    def update_course(
        self,
        course: Course,
        name: str,
        total_credit: int,
        lecture_credit: int,
        lab_credit: int,
        point: float,
        semester: int,
    ) -> None:
        """Overwrite a course's fields in place; the point is kept as a whole number."""
        course.name = name
        course.total_credit = total_credit
        course.lecture_credit = lecture_credit
        course.lab_credit = lab_credit
        course.point = int(point)
        course.semester = semester

    def change_semester(self, course: Course, semester: int) -> Course:
        """Move a course to another semester and return the moved course."""
        moved = replace(course, semester=semester)
        self.add_course(moved)
        self.delete_course(course.id, course.semester)
        return moved

    def load_csv(self, path) -> None:
        """Add every course of a CSV file whose header line is skipped."""
        with open(path, encoding="utf-8") as handle:
            next(handle, None)
            for raw in handle:
                line = raw.rstrip("\n")
                if not line.strip():
                    continue
                fields = line.split(",", 6)
                if len(fields) < 7:
                    raise ValueError(f"malformed course record: {line!r}")
                course_id, name, total, lecture, lab, point, semester = fields
                self.add_course(
                    Course(
                        id=course_id,
                        name=name,
                        total_credit=_leading_int(total),
                        lecture_credit=_leading_int(lecture),
                        lab_credit=_leading_int(lab),
                        point=_leading_int(point),
                        semester=_leading_int(semester) - 1,
                    )
                )

    def format_table(self) -> str:
        """Return the courses as a table, one block per semester."""
        if not self._semesters[0]:
            return "No course data available.\n"
        header = (
            f"| {'ID':<5} | {'Course Name':<38} | {'Total cre.':<10} | "
            f"{'Lecture cre.':<12} | {'Lab cre.':<8} | {'Point':<5} | {'Semester':<8} | "
        )
        lines = [header]
        for bucket in self._semesters:
            if not bucket:
                continue
            lines.append(_RULE)
            lines.extend(course.format_row() for course in bucket)
        lines.append(_RULE)
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.format_table()