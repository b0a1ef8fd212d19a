# cgpacalc

An interactive calculator for grade point averages. It loads a model
curriculum from a CSV file and lets a student build a personal course list
over six semesters. The student can record points on a 10-point scale. It
computes the GPA of one semester, and the CGPA either weighted by course
credits or as the mean of the semester GPAs.

## Installation

```
pip install .
```

## Running

```
cgpacalc [CATALOGUE]
```

`CATALOGUE` is the curriculum CSV file. It defaults to
`course-data/courses.csv`, relative to the current directory. If the file
does not exist, the curriculum starts empty.

The program first asks for the student's numeric ID and name. It then shows
this menu:

```
1. Show model curriculum
2. Show student information
3. Add course manually
4. Add course from curriculum
5. Delete course
6. Update course
7. Set point for a course
8. Calculate GPA of a semester
9. Calculate CGPA by course
10. Calculate CGPA by semester
11. See menu
12. Exit
```

Option 12 ends the program. End of input (Ctrl-D) or Ctrl-C also ends it.

The program checks input as it is typed and asks again when the input is
invalid:

- A course ID is two letters followed by three digits, for example `IT001`. It is stored in upper case.
- A semester runs from 1 to 6.
- The total credit runs from 0 to 10.
- The credit split asks for a count from 0 to the total. The rest of the total makes up the other credit kind.
- A point runs from 0 to 10.

A point set with option 7 is stored as a whole number, so the fraction is dropped.

A semester with no courses has a GPA of 0. The curriculum table prints
"No course data available." when the first semester has no courses.

## Curriculum file

The file starts with a header line, followed by one course per line:

```
id,name,totalCredit,lectureCredit,labCredit,point,semester
IT001,Introduction to Programming,4,3,1,0,1
```

Semesters are written as 1 to 6 in the file. Numeric fields are read as whole numbers. Blank lines are skipped.

## Using it as a library

```python
from cgpacalc.courselist import CourseList
from cgpacalc.student import Student

catalogue = CourseList()
catalogue.load_csv("courses.csv")

student = Student(id=123, name="Nguyen Van An")
student.add_course(catalogue, "IT001", 0)
student.set_point("IT001", 0, 8)
print(student.semester_gpa(0))
print(student.cgpa_by_course())
print(student.cgpa_by_semester())
```

Semester indices passed to the library are zero-based, from 0 to 5. Within
a semester, the most recently added course comes first.

### Modules

`cgpacalc.course`
: `Course` is a dataclass with `to_csv()` and `format_row()`.

`cgpacalc.courselist`
: `CourseList` provides `add_course`, `find`, `delete_course`, `update_course`, `change_semester`, `semester`, `copy`, `load_csv` and `format_table`. It supports iteration and `len()`.

`cgpacalc.student`
: `Student` provides `add_course`, `set_point`, `semester_gpa`, `cgpa_by_semester`, `cgpa_by_course` and `course_count`. `read_student(prompter)` reads a student interactively.

`cgpacalc.validation`
: The `parse_*` functions raise `ValidationError` on bad input. `Prompter` re-asks until an answer is valid.

`cgpacalc.csvdata`
: - `write_courses_interactively(path, prompter)` replaces a curriculum file with courses typed at the prompter.
  - `convert_csv_format(source, destination)` rewrites a raw export whose records are `semester,id,name,total,lecture,lab` into the curriculum layout, with every point set to 0.
  - `delete_course_from_csv(path, course_id)` removes every record with that ID and returns how many were removed.

`cgpacalc.cli`
: `run_menu` runs the interactive menu. `main` is the command-line entry point.

## What it does not do

The student's course list lives only in memory. It is not saved when the
program exits, and the menu has no option to load or store it. The menu also
never writes the curriculum file; the `cgpacalc.csvdata` helpers are
available only from Python.

## Tests

```
pip install .[test]
pytest
```