# studentrecords

A console menu for keeping student records. Each student has a name, a
gender and scores in maths, English and computing. Records are appended to a
plain text file, one student per line:

```
<id> <name> <gender> <math> <english> <computer> <total>
```

Each new student gets a random id from 2014000 to 2014999. The program does
not check whether that id is already taken. When the file is read back, the
stored total is parsed but not used. The total is always worked out again
from the three scores.

## Installing

```
pip install .
```

## Running

```
studentrecords
studentrecords --file path/to/records.txt
```

By default the records are kept in `student.txt` in the current directory.
`--file` names a different data file. The menu prompts are in Chinese. It
offers these choices:

1. **Add** a student. You are asked for the name, gender and three scores.
   If any field is empty, nothing is written.
2. **Display** every student with id, name, gender and the three scores, as
   a tab-separated table.
3. **Select** a student by id or by name. The first match is shown. Enter
   `0` to go back to the main menu.
4. **Sort** the students by total score, highest first. The table shows id,
   name, gender and total.
5. **Exit**. The program also ends when input ends.

## Using it from Python

```python
from studentrecords.store import StudentStore

store = StudentStore("student.txt")
alice = store.add("Alice", "F", 90, 85, 88)
print(alice.student_id, alice.total())

for student in store.ranked_by_total():
    print(student.to_line())

print(store.find_by_name("Alice"))
print(store.find_by_id(alice.student_id))
```

- `StudentStore(path="student.txt")` wraps one data file.
  - `add(name, gender, math, english, computer)` appends a record and
    returns the new `Student`.
  - `load()` returns every student in file order.
  - `find_by_id(student_id)` and `find_by_name(name)` return the first
    match.
  - `ranked_by_total()` returns all students, highest total first.
- `Student` is a frozen dataclass with the fields `student_id`, `name`,
  `gender`, `math`, `english` and `computer`. It also has `total()` and
  `to_line()`.
- `parse_students(text)` in `studentrecords.student` reads records from text
  you already have. It raises `ValueError` on a non-integer field or an
  incomplete record.
- `new_student_id(rng)` in `studentrecords.store` draws an id from any object
  that has a `randrange` method.
- `format_display_table(students)` and `format_ranking_table(students)` in
  `studentrecords.app` build the two tables that the menu prints.

### Errors

- `EmptyFieldError` is raised when a required field is blank. It is a
  subclass of both `StoreError` and `ValueError`.
- `StoreError` is raised in these cases:
  - the data file cannot be opened;
  - the data file is malformed;
  - a name or gender contains whitespace;
  - a score is not an integer.
- `LookupError` is raised by the two `find_by_*` methods when there is no
  match.

## What it does not do

This package has a text menu only. It has no graphical window.

## Tests

```
pip install .[test]
pytest
```