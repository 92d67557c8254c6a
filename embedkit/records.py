"""Plain-text storage of student records, one field per line."""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass

_FIELDS_PER_RECORD = 3


@dataclass
class Student:
    """A student record: name, roll number and branch."""

    name: str = ""
    rollno: int = 0
    branch: str = ""


def _check_token(value: str, field: str) -> str:
    if not value or any(ch.isspace() for ch in value):
        raise ValueError(f"{field} must be a non-empty word without whitespace: {value!r}")
    return value


def write_students(path: str | os.PathLike[str], students: Iterable[Student]) -> None:
    """Write ``students`` to ``path``, each field on its own line."""
    lines = []
    for student in students:
        lines.append(_check_token(student.name, "name"))
        lines.append(str(int(student.rollno)))
        lines.append(_check_token(student.branch, "branch"))
    with open(path, "w", encoding="utf-8") as handle:
        handle.writelines(f"{line}\n" for line in lines)


def read_students(path: str | os.PathLike[str]) -> list[Student]:
    """Read the records in ``path`` as whitespace-separated name, roll number, branch."""
    with open(path, encoding="utf-8") as handle:
        tokens = handle.read().split()
    if len(tokens) % _FIELDS_PER_RECORD:
        raise ValueError("file ends in the middle of a record")
    students = []
    for start in range(0, len(tokens), _FIELDS_PER_RECORD):
        name, rollno, branch = tokens[start : start + _FIELDS_PER_RECORD]
        try:
            number = int(rollno)
        except ValueError:
            raise ValueError(f"roll number is not an integer: {rollno!r}") from None
        students.append(Student(name, number, branch))
    return students