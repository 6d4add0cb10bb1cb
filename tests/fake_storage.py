"""In-memory Storage implementations for router tests."""

from typing import Dict, List

from students_api.database import Storage
from students_api.errors import NotFoundError, StorageError
from students_api.models.student import Student


class InMemoryStorage(Storage):
    def __init__(self):
        self.rows: Dict[int, Student] = {}
        self._next_id = 1

    def create_student(self, name: str, email: str, age: int) -> int:
        student_id = self._next_id
        self._next_id += 1
        self.rows[student_id] = Student(id=student_id, name=name, email=email, age=age)
        return student_id

    def get_student_by_id(self, student_id: int) -> Student:
        if student_id not in self.rows:
            raise NotFoundError(f"student not found with id {student_id}")
        return self.rows[student_id]

    def get_all_students(self) -> List[Student]:
        return list(self.rows.values())

    def update_student(self, student_id: int, name: str, email: str, age: int) -> Student:
        if student_id not in self.rows:
            raise NotFoundError("no rows affected")
        self.rows[student_id] = Student(id=student_id, name=name, email=email, age=age)
        return self.rows[student_id]

    def delete_student_by_id(self, student_id: int) -> None:
        self.rows.pop(student_id, None)

    def delete_all_students(self) -> None:
        self.rows.clear()


class BrokenStorage(InMemoryStorage):
    """Every operation fails the way a locked database would."""

    def _fail(self, *args, **kwargs):
        raise StorageError("database is locked")

    create_student = _fail
    get_student_by_id = _fail
    get_all_students = _fail
    update_student = _fail
    delete_student_by_id = _fail
    delete_all_students = _fail

    def ping(self) -> bool:
        return False
