"""A flat text file of student records."""

from __future__ import annotations

import random
from pathlib import Path
from typing import Protocol

from studentrecords.student import Student, parse_students

_ID_BASE = 2014000
_ID_SPAN = 1000


class StoreError(Exception):
    """The data file could not be used or a value was rejected."""


class EmptyFieldError(StoreError, ValueError):
    """A required field was left empty."""


class _RandRange(Protocol):
    def randrange(self, stop: int) -> int: ...


def new_student_id(rng: _RandRange) -> int:
    """Draw a student number in the range 2014000..2014999."""
    return rng.randrange(_ID_SPAN) + _ID_BASE


def _require_text(value: object, field: str) -> str:
    text = str(value).strip()
    if not text:
        raise EmptyFieldError(f"{field} must not be empty")
    return text


def _require_word(value: object, field: str) -> str:
    text = _require_text(value, field)
    if len(text.split()) != 1:
        raise StoreError(f"{field} must not contain whitespace: {text!r}")
    return text


def _require_score(value: object, field: str) -> int:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    text = _require_text(value, field)
    try:
        return int(text)
    except ValueError:
        raise StoreError(f"{field} must be an integer, got {text!r}") from None


class StudentStore:
    """Student records kept one per line in a text file."""

    def __init__(self, path: str | Path = "student.txt") -> None:
        self.path = Path(path)
        self.rng: _RandRange = random.Random()

    def add(self, name, gender, math, english, computer) -> Student:
        """Append a new student with a freshly drawn id and return it."""
        student = Student(
            student_id=new_student_id(self.rng),
            name=_require_word(name, "name"),
            gender=_require_word(gender, "gender"),
            math=_require_score(math, "math"),
            english=_require_score(english, "english"),
            computer=_require_score(computer, "computer"),
        )
        try:
            with self.path.open("a", encoding="utf-8") as handle:
                handle.write(student.to_line() + "\n")
        except OSError as exc:
            raise StoreError(f"data file could not be opened: {self.path}") from exc
        return student

    def load(self) -> list[Student]:
        """Read every student in file order."""
        try:
            text = self.path.read_text(encoding="utf-8")
        except OSError as exc:
            raise StoreError(f"data file could not be opened: {self.path}") from exc
        try:
            return parse_students(text)
        except ValueError as exc:
            raise StoreError(f"malformed data file {self.path}: {exc}") from exc

    def find_by_id(self, student_id) -> Student:
        """Return the first student with this id; raise LookupError if absent."""
        if isinstance(student_id, int) and not isinstance(student_id, bool):
            wanted = student_id
        else:
            text = _require_text(student_id, "id")
            try:
                wanted = int(text)
            except ValueError:
                raise LookupError(f"id does not exist: {text}") from None
        for student in self.load():
            if student.student_id == wanted:
                return student
        raise LookupError(f"id does not exist: {wanted}")

    def find_by_name(self, name) -> Student:
        """Return the first student with this name; raise LookupError if absent."""
        wanted = _require_text(name, "name")
        for student in self.load():
            if student.name == wanted:
                return student
        raise LookupError(f"name does not exist: {wanted}")

    def ranked_by_total(self) -> list[Student]:
        """All students, highest total first."""
        return sorted(self.load(), key=Student.total, reverse=True)