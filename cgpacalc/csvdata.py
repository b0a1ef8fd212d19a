"""Creating and editing course CSV files."""

from __future__ import annotations

import os
import re
import tempfile
from pathlib import Path

from .course import Course, read_course
from .validation import ValidationError

HEADER = "id,name,totalCredit,lectureCredit,labCredit,point,semester"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _leading_int(token: str) -> int:
    match = _LEADING_INT.match(token)
    if match is None:
        raise ValueError(f"not a number: {token!r}")
    return int(match.group(1))


def _parse_count(text: str) -> int:
    parts = text.split()
    try:
        return int(parts[0] if parts else "")
    except ValueError:
        raise ValidationError(
            "Invalid input. Number of courses must be a number."
        ) from None


def _announce_replacement(path: Path) -> str:
    if path.exists():
        path.unlink()
        return "Replacing data..."
    return "Creating csv file..."


def write_courses_interactively(path, prompter) -> int:
    """Replace ``path`` with courses entered at the prompter; return how many."""
    target = Path(path)
    prompter.output.write(_announce_replacement(target) + "\n")
    with open(target, "w", encoding="utf-8", newline="") as out:
        out.write(HEADER + "\n")
        count = prompter.ask("number of courses to enter: ", _parse_count)
        written = 0
        for _ in range(max(count, 0)):
            out.write(read_course(prompter).to_csv() + "\n")
            written += 1
    return written


def convert_csv_format(source, destination) -> int:
    """Rewrite a raw curriculum CSV into the course CSV format.

    Each raw record is ``semester,id,name,total,lecture,lab``; the point of
    every converted course is 0. Returns the number of records written.
    """
    with open(source, encoding="utf-8") as handle:
        next(handle, None)
        records = [raw.rstrip("\n") for raw in handle]

    target = Path(destination)
    if target.exists():
        target.unlink()
    written = 0
    with open(target, "w", encoding="utf-8", newline="") as out:
        out.write(HEADER + "\n")
        for line in records:
            if not line.strip():
                continue
            fields = line.split(",")
            if len(fields) < 6:
                raise ValueError(f"malformed curriculum record: {line!r}")
            semester, course_id, name, total, lecture, lab = fields[:6]
            course = Course(
                id=course_id,
                name=name,
                total_credit=_leading_int(total),
                lecture_credit=_leading_int(lecture),
                lab_credit=_leading_int(lab),
                point=0,
                semester=_leading_int(semester),
            )
            out.write(course.to_csv() + "\n")
            written += 1
    return written


def delete_course_from_csv(path, course_id: str) -> int:
    """Drop every record whose ID is ``course_id``; return how many were dropped."""
    target = Path(path)
    with open(target, encoding="utf-8") as handle:
        header = next(handle, "").rstrip("\n")
        lines = [raw.rstrip("\n") for raw in handle]

    kept = [line for line in lines if line.split(",", 1)[0] != course_id]
    fd, temp_name = tempfile.mkstemp(
        dir=target.parent or None, prefix=".tmp-", suffix=".csv"
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as out:
            out.write(header + "\n")
            for line in kept:
                out.write(line + "\n")
        os.replace(temp_name, target)
    except BaseException:
        if os.path.exists(temp_name):
            os.unlink(temp_name)
        raise
    return len(lines) - len(kept)