"""Interactive menu for computing a student's GPA and CGPA."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence, TextIO

from .course import read_course
from .courselist import CourseList
from .student import Student, read_student
from .validation import Prompter, ValidationError

DEFAULT_CATALOGUE = "course-data/courses.csv"

BANNER = (
    "---------- CUMULATIVE GRADE POINT AVERAGE CALCULATOR ---------\n"
    "This CGPA calculator is for 2nd Bachelor Degree in Information Technology at UIT.\n"
    "\n"
)

MENU = (
    "1. Show model curriculum\n"
    "2. Show student information\n"
    "3. Add course manually\n"
    "4. Add course from curriculum\n"
    "5. Delete course\n"
    "6. Update course\n"
    "7. Set point for a course\n"
    "8. Calculate GPA of a semester\n"
    "9. Calculate CGPA by course\n"
    "10. Calculate CGPA by semester\n"
    "11. See menu\n"
    "12. Exit"
)

_MENU_TITLE = "\n------------------------- Option menu --------------------------\n"


def _number(value: float) -> str:
    return format(value, "g")


def _parse_option(text: str) -> int:
    parts = text.split()
    try:
        option = int(parts[0] if parts else "")
    except ValueError:
        raise ValidationError("Invalid input. Enter option (1-12).") from None
    if not 1 <= option <= 12:
        raise ValidationError("Invalid option. Please try again.")
    return option


def _not_found(output: TextIO, course_id: str) -> None:
    output.write(f'Error: Course ID "{course_id}" not found!\n')


def run_menu(
    student: Student, catalogue: CourseList, prompter: Prompter, output: TextIO
) -> None:
    """Serve menu options until the user chooses to exit."""
    while True:
        option = prompter.ask("\nEnter option (1-12) (11 to see menu): ", _parse_option)

        if option == 1:
            output.write(
                "\n---------------------------------------------- Model curriculum "
                "--------------------------------------------\n"
            )
            output.write(catalogue.format_table())
        elif option == 2:
            output.write(
                "\n----------------------- Student information --------------------\n"
            )
            output.write(str(student))
        elif option == 3:
            output.write(
                "\n-------------------------- Add course --------------------------\n"
            )
            student.courses.add_course(read_course(prompter))
            output.write("Course added successfully!\n")
        elif option == 4:
            output.write(
                "\n-------------------------- Add course --------------------------\n"
            )
            course_id = prompter.ask_course_id()
            if catalogue.find(course_id) is None:
                _not_found(output, course_id)
                continue
            semester = prompter.ask_semester()
            if student.add_course(catalogue, course_id, semester):
                output.write("Course added successfully!\n")
            else:
                output.write("Error adding course...\n")
        elif option == 5:
            output.write(
                "\n------------------------ Delete course -------------------------\n"
            )
            course_id = prompter.ask_course_id()
            semester = prompter.ask_semester()
            if student.courses.delete_course(course_id, semester):
                output.write("Course deleted successfully!\n")
            else:
                output.write("Error deleting course...\n")
        elif option == 6:
            output.write(
                "\n------------------------ Update course -------------------------\n"
            )
            course_id = prompter.ask_course_id()
            course = student.courses.find(course_id)
            if course is None:
                _not_found(output, course_id)
                continue
            name = prompter.ask_line("Name (Enter if no change): ")
            if name:
                course.name = name
            course.total_credit = prompter.ask_total_credit()
            course.lecture_credit = prompter.ask_lecture_credit(course.total_credit)
            course.lab_credit = course.total_credit - course.lecture_credit
            course.point = prompter.ask_point()
            student.courses.change_semester(course, prompter.ask_semester())
            output.write("Course updated successfully!\n")
        elif option == 7:
            output.write(
                "\n-------------------------- Set point ---------------------------\n"
            )
            course_id = prompter.ask_course_id()
            semester = prompter.ask_semester()
            if student.courses.find(course_id, semester) is None:
                _not_found(output, course_id)
                continue
            point = prompter.ask_point()
            if student.set_point(course_id, semester, point):
                output.write(f'Set point for course "{course_id}" successfully!\n')
            else:
                output.write("Error setting point...\n")
        elif option == 8:
            output.write(
                "---------------- Calculate GPA for a semester -----------------\n"
            )
            semester = prompter.ask_semester()
            gpa = student.semester_gpa(semester)
            output.write(f"GPA for semester {semester + 1} = {_number(gpa)}\n")
        elif option == 9:
            output.write(
                "\n------------------- Calculate CGPA by course -------------------\n"
            )
            output.write(
                f"CGPA of student {student.name} = {_number(student.cgpa_by_course())}\n"
            )
        elif option == 10:
            output.write(
                "\n------------------ Calculate CGPA by semester ------------------\n"
            )
            output.write(
                f"CGPA of student {student.name} = "
                f"{_number(student.cgpa_by_semester())}\n"
            )
        elif option == 11:
            output.write(_MENU_TITLE)
            output.write(MENU + "\n")
            output.write("-" * 64 + "\n")
        else:
            return


def _load_catalogue(path) -> CourseList:
    catalogue = CourseList()
    try:
        catalogue.load_csv(path)
    except FileNotFoundError:
        pass
    return catalogue


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the interactive calculator."""
    parser = argparse.ArgumentParser(
        prog="cgpacalc", description="Interactive GPA and CGPA calculator."
    )
    parser.add_argument(
        "catalogue",
        nargs="?",
        default=DEFAULT_CATALOGUE,
        help="CSV file holding the model curriculum",
    )
    args = parser.parse_args(argv)

    output = sys.stdout
    prompter = Prompter(output=output)
    output.write(BANNER)
    try:
        student = read_student(prompter)
        output.write("\n")
        output.write(_MENU_TITLE)
        output.write(MENU + "\n")
        output.write("-" * 65 + "\n")
        catalogue = _load_catalogue(args.catalogue)
        run_menu(student, catalogue, prompter, output)
    except (EOFError, KeyboardInterrupt):
        output.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())