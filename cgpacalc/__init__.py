"""Track a student's courses across six semesters and compute GPA and CGPA."""

__version__ = "0.1.0"