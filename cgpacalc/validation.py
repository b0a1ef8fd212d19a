"""Parsing of user-entered course fields and an interactive prompter."""

from __future__ import annotations

import sys
from typing import Callable, Optional, TextIO, TypeVar

T = TypeVar("T")

_DIGITS = "0123456789"


class ValidationError(ValueError):
    """Raised when a piece of user input does not meet the expected format."""


def _first_token(text: str) -> str:
    parts = text.split()
    return parts[0] if parts else ""


def _parse_int(text: str, what: str) -> int:
    try:
        return int(_first_token(text))
    except ValueError:
        raise ValidationError(f"Invalid input. {what} must be a number.") from None


def _is_ascii_letter(char: str) -> bool:
    return char.isascii() and char.isalpha()


def parse_course_id(text: str) -> str:
    """Return a course ID such as ``IT001`` in upper case."""
    token = _first_token(text)
    if (
        len(token) != 5
        or not all(_is_ascii_letter(char) for char in token[:2])
        or not all(char in _DIGITS for char in token[2:])
    ):
        raise ValidationError("Invalid input. Course ID must be in the format IT001.")
    return token.upper()


def parse_semester(text: str) -> int:
    """Return the zero-based index of a semester entered as 1-6."""
    semester = _parse_int(text, "Semester")
    if not 1 <= semester <= 6:
        raise ValidationError("Error: Semester must be in range [1-6]")
    return semester - 1


def parse_total_credit(text: str) -> int:
    """Return a total credit count in the range 0-10."""
    credit = _parse_int(text, "Total credit")
    if not 0 <= credit <= 10:
        raise ValidationError("Error: Total credit must be in range [0-10]")
    return credit


def parse_lecture_credit(text: str, maximum: int) -> int:
    """Return a lecture credit count in the range 0-``maximum``."""
    credit = _parse_int(text, "Lecture credit")
    if not 0 <= credit <= maximum:
        raise ValidationError(f"Error: Lecture credit must be in range [0-{maximum}]")
    return credit


def parse_point(text: str) -> float:
    """Return a grade point on a scale of 10."""
    try:
        point = float(_first_token(text))
    except ValueError:
        raise ValidationError("Invalid input. Point must be a number.") from None
    if not 0 <= point <= 10:
        raise ValidationError("Error: Point must be in scale of 10.")
    return point


class Prompter:
    """Asks questions on an output stream and re-asks until the answer is valid."""

    def __init__(
        self,
        input_fn: Optional[Callable[[], str]] = None,
        output: Optional[TextIO] = None,
    ) -> None:
        self.input_fn = input_fn if input_fn is not None else input
        self.output = output if output is not None else sys.stdout

    def _show(self, text: str) -> None:
        self.output.write(text)
        self.output.flush()

    def ask(self, prompt: str, parser: Callable[[str], T]) -> T:
        """Prompt repeatedly until ``parser`` accepts the answer."""
        while True:
            self._show(prompt)
            try:
                return parser(self.input_fn())
            except ValidationError as exc:
                self._show(f"{exc}\n")

    def ask_line(self, prompt: str) -> str:
        """Prompt once and return the whole answer line."""
        self._show(prompt)
        return self.input_fn()

    def ask_course_id(self) -> str:
        return self.ask("Enter course ID (IT001): ", parse_course_id)

    def ask_semester(self) -> int:
        return self.ask("Enter semester (1-6): ", parse_semester)

    def ask_total_credit(self) -> int:
        return self.ask("Enter total credit (0-10): ", parse_total_credit)

    def ask_lecture_credit(self, maximum: int) -> int:
        return self.ask(
            f"Enter lecture credit (0-{maximum}): ",
            lambda text: parse_lecture_credit(text, maximum),
        )

    def ask_point(self) -> float:
        return self.ask("Enter point (0-10): ", parse_point)