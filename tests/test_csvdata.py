import io

import pytest

from cgpacalc.course import Course
from cgpacalc.courselist import CourseList
from cgpacalc.csvdata import (
    HEADER,
    convert_csv_format,
    delete_course_from_csv,
    write_courses_interactively,
)
from cgpacalc.validation import Prompter


def make_prompter(*answers):
    out = io.StringIO()
    it = iter(answers)

    def read():
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return Prompter(read, out), out


def test_write_courses_creates_file(tmp_path):
    path = tmp_path / "courses.csv"
    prompter, out = make_prompter("1", "it001", "Intro", "4", "3", "8.5", "2")
    written = write_courses_interactively(path, prompter)
    assert written == 1
    assert "Creating csv file..." in out.getvalue()
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[0] == HEADER
    expected = Course("IT001", "Intro", 4, 1, 3, 8.5, 1).to_csv()
    assert lines[1:] == [expected]


def test_write_courses_replaces_existing_file(tmp_path):
    path = tmp_path / "courses.csv"
    path.write_text("old content\n", encoding="utf-8")
    prompter, out = make_prompter("0")
    assert write_courses_interactively(path, prompter) == 0
    assert "Replacing data..." in out.getvalue()
    assert path.read_text(encoding="utf-8").splitlines() == [HEADER]


def test_write_courses_reasks_invalid_count(tmp_path):
    path = tmp_path / "courses.csv"
    prompter, out = make_prompter("many", "0")
    assert write_courses_interactively(path, prompter) == 0
    assert "must be a number" in out.getvalue()


def test_convert_csv_format(tmp_path):
    source = tmp_path / "raw.csv"
    source.write_text(
        "semester,id,name,total,lecture,lab\n1,IT001,Intro,4,3,1\n2,MA002,Calculus,3,3,0\n",
        encoding="utf-8",
    )
    destination = tmp_path / "courses.csv"
    assert convert_csv_format(source, destination) == 2
    lines = destination.read_text(encoding="utf-8").splitlines()
    assert lines[0] == HEADER
    assert lines[1] == Course("IT001", "Intro", 4, 3, 1, 0, 1).to_csv()
    assert lines[2] == Course("MA002", "Calculus", 3, 3, 0, 0, 2).to_csv()


def test_convert_output_loads_as_course_list(tmp_path):
    source = tmp_path / "raw.csv"
    source.write_text("h\n2,IT001,Intro,4,3,1\n", encoding="utf-8")
    destination = tmp_path / "courses.csv"
    convert_csv_format(source, destination)
    courses = CourseList()
    courses.load_csv(destination)
    course = courses.find("IT001")
    assert course is not None
    assert course.semester == 1
    assert course.point == 0


def test_convert_missing_source_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        convert_csv_format(tmp_path / "absent.csv", tmp_path / "out.csv")


def test_convert_malformed_record_raises(tmp_path):
    source = tmp_path / "raw.csv"
    source.write_text("h\n1,IT001,Intro\n", encoding="utf-8")
    with pytest.raises(ValueError):
        convert_csv_format(source, tmp_path / "out.csv")


def test_delete_course_from_csv(tmp_path):
    path = tmp_path / "courses.csv"
    records = [
        "IT001,Intro,4,3,1,0,1",
        "MA002,Calculus,3,3,0,0,2",
        "IT003,Data,4,3,1,0,3",
    ]
    path.write_text(HEADER + "\n" + "\n".join(records) + "\n", encoding="utf-8")
    assert delete_course_from_csv(path, "MA002") == 1
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines == [HEADER, records[0], records[2]]
    assert sorted(p.name for p in tmp_path.iterdir()) == ["courses.csv"]


def test_delete_unknown_course_keeps_file(tmp_path):
    path = tmp_path / "courses.csv"
    content = HEADER + "\nIT001,Intro,4,3,1,0,1\n"
    path.write_text(content, encoding="utf-8")
    assert delete_course_from_csv(path, "ZZ999") == 0
    assert path.read_text(encoding="utf-8") == content