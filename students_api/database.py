import logging
import os
import sqlite3
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import List

from students_api.errors import NotFoundError, StorageError
from students_api.models.student import Student

logger = logging.getLogger(__name__)


class Storage(ABC):
    """Persistence contract for the students table.

    Implementations trust their caller: field validation happens at the
    request boundary, not here.
    """

    @abstractmethod
    def create_student(self, name: str, email: str, age: int) -> int:
        """Insert a student and return its generated id."""

    @abstractmethod
    def get_student_by_id(self, student_id: int) -> Student:
        """Return one student; raise NotFoundError when no row matches."""

    @abstractmethod
    def get_all_students(self) -> List[Student]:
        """Return every student, empty list when the table is empty."""

    @abstractmethod
    def update_student(self, student_id: int, name: str, email: str, age: int) -> Student:
        """Overwrite name, email and age; raise NotFoundError when no row is affected."""

    @abstractmethod
    def delete_student_by_id(self, student_id: int) -> None:
        """Delete one student. Deleting a missing id is not an error."""

    @abstractmethod
    def delete_all_students(self) -> None:
        """Remove every student."""

    def ping(self) -> bool:
        return True


class SqliteStorage(Storage):
    """Storage backed by a SQLite file.

    Each operation opens and closes its own connection, so a single instance
    can be shared by every request thread.
    """

    def __init__(self, path: str):
        self.path = path
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        self.create_database()

    # Database Connection

    def get_db_connection(self):
        conn = sqlite3.connect(self.path)
        conn.row_factory = sqlite3.Row
        return conn

    @contextmanager
    def _cursor(self, operation: str):
        try:
            conn = self.get_db_connection()
        except sqlite3.Error as e:
            logger.error(f"Failed to open {self.path} for {operation}: {e}")
            raise StorageError(str(e)) from e

        try:
            yield conn.cursor()
            conn.commit()
        except (sqlite3.Error, OverflowError) as e:
            conn.rollback()
            logger.error(f"Failed to {operation}: {e}")
            raise StorageError(str(e)) from e
        finally:
            conn.close()

    def create_database(self) -> None:
        with self._cursor("create students table") as cursor:
            cursor.execute('''
                CREATE TABLE IF NOT EXISTS students (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    name TEXT,
                    email TEXT,
                    age INTEGER
                )
            ''')

    # ---------------------------------------------------------
    # CREATE
    # ---------------------------------------------------------
    def create_student(self, name: str, email: str, age: int) -> int:
        with self._cursor("create student") as cursor:
            cursor.execute(
                "INSERT INTO students (name, email, age) VALUES (?, ?, ?)",
                (name, email, age),
            )
            return cursor.lastrowid

    # ---------------------------------------------------------
    # READ
    # ---------------------------------------------------------
    def get_student_by_id(self, student_id: int) -> Student:
        with self._cursor("get student") as cursor:
            cursor.execute(
                "SELECT id, name, email, age FROM students WHERE id = ?",
                (student_id,),
            )
            row = cursor.fetchone()

        if row is None:
            raise NotFoundError(f"student not found with id {student_id}")
        return self._row_to_student(row)

    def get_all_students(self) -> List[Student]:
        with self._cursor("get all students") as cursor:
            cursor.execute("SELECT id, name, email, age FROM students")
            rows = cursor.fetchall()

        return [self._row_to_student(row) for row in rows]

    # ---------------------------------------------------------
    # UPDATE
    # ---------------------------------------------------------
    def update_student(self, student_id: int, name: str, email: str, age: int) -> Student:
        with self._cursor("update student") as cursor:
            cursor.execute(
                "UPDATE students SET name = ?, email = ?, age = ? "
                "WHERE id = ?",
                (name, email, age, student_id),
            )
            if cursor.rowcount == 0:
                raise NotFoundError("no rows affected")

        return Student(id=student_id, name=name, email=email, age=age)

    # ---------------------------------------------------------
    # DELETE
    # ---------------------------------------------------------
    def delete_student_by_id(self, student_id: int) -> None:
        with self._cursor("delete student") as cursor:
            cursor.execute("DELETE FROM students WHERE id = ?", (student_id,))

    def delete_all_students(self) -> None:
        with self._cursor("delete all students") as cursor:
            cursor.execute("DELETE FROM students")

    def ping(self) -> bool:
        try:
            with self._cursor("ping") as cursor:
                cursor.execute("SELECT 1")
        except StorageError:
            return False
        return True

    @staticmethod
    def _row_to_student(row: sqlite3.Row) -> Student:
        return Student(
            id=row["id"],
            name=row["name"],
            email=row["email"],
            age=row["age"],
        )
