import pytest

from studentrecords.student import Student, parse_students


def make(sid=2014001, name="Bob", gender="M", math=90, english=80, computer=70):
    return Student(sid, name, gender, math, english, computer)


def test_to_line_format():
    assert make().to_line() == "2014001 Bob M 90 80 70 240"


def test_round_trip_single():
    student = make()
    assert parse_students(student.to_line() + "\n") == [student]


def test_round_trip_many():
    students = [make(), make(2014002, "Ann", "F", 60, 70, 80), make(2014003, "Li", "M", 0, 0, 0)]
    text = "\n".join(s.to_line() for s in students) + "\n"
    assert parse_students(text) == students


def test_empty_text_gives_no_students():
    assert parse_students("") == []
    assert parse_students("\n\n  \n") == []


def test_stored_total_is_ignored():
    (student,) = parse_students("1 A M 1 2 3 999\n")
    assert student.total() == 6


def test_total_matches_to_line_last_field():
    student = make(math=55, english=66, computer=77)
    assert student.to_line().split()[-1] == str(student.total())


def test_incomplete_record_raises():
    with pytest.raises(ValueError):
        parse_students("1 A M 1 2 3\n")


@pytest.mark.parametrize(
    "text",
    ["x A M 1 2 3 6", "1 A M one 2 3 6", "1 A M 1 2 3 six"],
)
def test_non_integer_field_raises(text):
    with pytest.raises(ValueError):
        parse_students(text)