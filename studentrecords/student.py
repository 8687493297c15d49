"""Student records and their one-line text representation."""

from __future__ import annotations

from dataclasses import dataclass

_FIELDS_PER_RECORD = 7


@dataclass(frozen=True)
class Student:
    """One student with scores in mathematics, English and computing."""

    student_id: int
    name: str
    gender: str
    math: int
    english: int
    computer: int

    def total(self) -> int:
        """Sum of the three subject scores."""
        return self.math + self.english + self.computer

    def to_line(self) -> str:
        """Render the record as a space-separated line, without a newline."""
        return " ".join(
            str(value)
            for value in (
                self.student_id,
                self.name,
                self.gender,
                self.math,
                self.english,
                self.computer,
                self.total(),
            )
        )


def _to_int(token: str, field: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise ValueError(f"{field} must be an integer, got {token!r}") from None


def parse_students(text: str) -> list[Student]:
    """Parse whitespace-separated records of seven fields each.

    Each record is: id, name, gender, math, english, computer, total.
    The stored total is read but not trusted; it is always recomputed.
    """
    tokens = text.split()
    if len(tokens) % _FIELDS_PER_RECORD:
        raise ValueError(
            f"incomplete record: {len(tokens) % _FIELDS_PER_RECORD} trailing field(s)"
        )
    students = []
    for sid, name, gender, math, english, computer, total in zip(
        *[iter(tokens)] * _FIELDS_PER_RECORD
    ):
        _to_int(total, "total")
        students.append(
            Student(
                student_id=_to_int(sid, "id"),
                name=name,
                gender=gender,
                math=_to_int(math, "math"),
                english=_to_int(english, "english"),
                computer=_to_int(computer, "computer"),
            )
        )
    return students