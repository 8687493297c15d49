"""Interactive menu for adding, listing, finding and ranking students."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable
from typing import Callable, TextIO

from studentrecords.store import EmptyFieldError, StoreError, StudentStore
from studentrecords.student import Student

TITLE = "学生信息管理系统"

_MENU = (
    f"===== {TITLE} =====\n"
    "1. 添加学生\n"
    "2. 浏览学生\n"
    "3. 查询学生\n"
    "4. 学生排序\n"
    "5. 退出\n"
    "请选择: "
)

_SELECT_MENU = "1. 按学号查询\n2. 按姓名查询\n0. 返回\n请选择: "

_DISPLAY_HEADER = ("学号", "姓名", "性别", "数学", "英语", "计算机")
_RANKING_HEADER = ("学号", "姓名", "性别", "总分")

_EXIT_CHOICE = "5"


def _table(header: Iterable[str], rows: Iterable[Iterable[object]]) -> str:
    lines = ["\t".join(header)]
    lines.extend("\t".join(str(cell) for cell in row) for row in rows)
    return "\n".join(lines)


def format_display_table(students: Iterable[Student]) -> str:
    """Tabulate id, name, gender and the three scores, one student per row."""
    return _table(
        _DISPLAY_HEADER,
        (
            (s.student_id, s.name, s.gender, s.math, s.english, s.computer)
            for s in students
        ),
    )


def format_ranking_table(students: Iterable[Student]) -> str:
    """Tabulate id, name, gender and total score, one student per row."""
    return _table(
        _RANKING_HEADER,
        ((s.student_id, s.name, s.gender, s.total()) for s in students),
    )


def _describe(student: Student) -> str:
    return "\n".join(
        (
            f"学号: {student.student_id}",
            f"姓名: {student.name}",
            f"性别: {student.gender}",
            f"数学: {student.math}",
            f"英语: {student.english}",
            f"计算机: {student.computer}",
        )
    )


def _file_message(exc: StoreError, opening_failed: str) -> str:
    if isinstance(exc.__cause__, OSError):
        return opening_failed
    return str(exc)


class Console:
    """A text menu over a student store, reading commands line by line."""

    def __init__(
        self,
        store: StudentStore,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self.store = store
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def run(self) -> int:
        """Serve the main menu until the user exits or input ends."""
        actions: dict[str, Callable[[], None]] = {
            "1": self._add,
            "2": self._display,
            "3": self._select,
            "4": self._sort,
        }
        while True:
            try:
                choice = self._ask(_MENU)
                if choice == _EXIT_CHOICE:
                    return 0
                action = actions.get(choice)
                if action is None:
                    self._say("无效选项")
                    continue
                action()
            except EOFError:
                return 0

    def _say(self, text: str) -> None:
        self.stdout.write(text + "\n")
        self.stdout.flush()

    def _ask(self, prompt: str) -> str:
        self.stdout.write(prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            raise EOFError
        return line.strip()

    def _add(self) -> None:
        name = self._ask("姓名: ")
        gender = self._ask("性别: ")
        math = self._ask("数学: ")
        english = self._ask("英语: ")
        computer = self._ask("计算机: ")
        try:
            student = self.store.add(name, gender, math, english, computer)
        except EmptyFieldError:
            self._say("存在空项")
            return
        except StoreError as exc:
            self._say(_file_message(exc, "数据文件打开失败"))
            return
        self._say(f"已添加 学号 {student.student_id}")

    def _display(self) -> None:
        try:
            students = self.store.load()
        except StoreError as exc:
            self._say(_file_message(exc, "文件打开失败"))
            return
        self._say(format_display_table(students))

    def _sort(self) -> None:
        try:
            students = self.store.ranked_by_total()
        except StoreError as exc:
            self._say(_file_message(exc, "文件打开失败"))
            return
        self._say(format_ranking_table(students))

    def _select(self) -> None:
        while True:
            choice = self._ask(_SELECT_MENU)
            if choice == "0":
                return
            if choice == "1":
                self._lookup("学号: ", "id不能为空", self.store.find_by_id)
            elif choice == "2":
                self._lookup("姓名: ", "姓名不能为空", self.store.find_by_name)
            else:
                self._say("无效选项")

    def _lookup(
        self, prompt: str, empty_message: str, finder: Callable[[str], Student]
    ) -> None:
        value = self._ask(prompt)
        if not value:
            self._say(empty_message)
            return
        try:
            student = finder(value)
        except LookupError:
            self._say(
                "id不存在！" if finder == self.store.find_by_id else "姓名不存在！"
            )
            return
        except StoreError as exc:
            self._say(_file_message(exc, "文件打开失败"))
            return
        self._say(_describe(student))


def main(argv: list[str] | None = None) -> int:
    """Start the interactive menu on standard input and output."""
    parser = argparse.ArgumentParser(prog="studentrecords", description=TITLE)
    parser.add_argument(
        "--file",
        default="student.txt",
        help="data file holding the student records (default: student.txt)",
    )
    args = parser.parse_args(argv)
    console = Console(StudentStore(args.file), sys.stdin, sys.stdout)
    return console.run()


if __name__ == "__main__":
    sys.exit(main())