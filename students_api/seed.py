"""Seed data for a development database.

    python -m students_api.seed generate --count 50 --out dummy_students.csv
    python -m students_api.seed load dummy_students.csv

`load` writes into the database at STORAGE_PATH.
"""

import argparse
import logging
from typing import List, Optional

import pandas as pd
from faker import Faker
from pydantic import ValidationError

from students_api.config import get_settings
from students_api.database import SqliteStorage, Storage
from students_api.errors import StorageError
from students_api.logger import setup_logging
from students_api.models.student import StudentCreate

logger = logging.getLogger(__name__)

NAME_COLUMNS = ("name", "student", "full name")
CSV_COLUMNS = ["name", "email", "age"]


def generate_students(count: int, seed: Optional[int] = None) -> List[StudentCreate]:
    """Fake students with unique emails and ages between 14 and 18."""
    fake = Faker()
    if seed is not None:
        fake.seed_instance(seed)

    return [
        StudentCreate(
            name=fake.name(),
            email=fake.unique.email(),
            age=fake.random_int(min=14, max=18),
        )
        for _ in range(count)
    ]


def write_csv(students: List[StudentCreate], path: str) -> None:
    df = pd.DataFrame([s.model_dump() for s in students], columns=CSV_COLUMNS)
    df.to_csv(path, index=False)


def read_csv(path: str) -> List[StudentCreate]:
    """
    Read students from a CSV file.
    Headers are matched case-insensitively: 'name', 'student' or 'full name'; 'email'; 'age'.
    Rows that would be rejected by the API are skipped.
    """
    df = pd.read_csv(path, dtype=str, keep_default_na=False)
    df.columns = [str(c).strip().lower() for c in df.columns]

    name_column = next((c for c in NAME_COLUMNS if c in df.columns), None)
    if name_column is None or "email" not in df.columns:
        raise ValueError(f"{path}: needs an email column and one of {', '.join(NAME_COLUMNS)}")

    students = []
    for index, row in df.iterrows():
        try:
            students.append(
                StudentCreate(
                    name=row[name_column].strip(),
                    email=row["email"].strip(),
                    age=int(row.get("age", "").strip()),
                )
            )
        # +2: header line and 1-based line numbers
        except ValidationError as e:
            logger.warning(f"Skipping line {index + 2} of {path}: {e.error_count()} invalid field(s)")
        except ValueError:
            logger.warning(f"Skipping line {index + 2} of {path}: age is not a whole number")

    return students


def load_students(storage: Storage, students: List[StudentCreate]) -> List[int]:
    """Insert students in order and return their ids."""
    return [storage.create_student(s.name, s.email, s.age) for s in students]


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="students_api.seed", description=__doc__.splitlines()[0])
    commands = parser.add_subparsers(dest="command", required=True)

    generate = commands.add_parser("generate", help="write fake students to a CSV file")
    generate.add_argument("--count", type=int, default=50)
    generate.add_argument("--out", default="dummy_students.csv")
    generate.add_argument("--seed", type=int, default=None)

    load = commands.add_parser("load", help="insert students from a CSV file")
    load.add_argument("path")

    args = parser.parse_args(argv)
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)

    if args.command == "generate":
        write_csv(generate_students(args.count, args.seed), args.out)
        logger.info(f"Wrote {args.count} students to {args.out}")
        return 0

    students = read_csv(args.path)
    try:
        ids = load_students(SqliteStorage(settings.storage_path), students)
    except StorageError as e:
        logger.error(f"Insert failed: {e}")
        return 1
    logger.info(f"Inserted {len(ids)} students into {settings.storage_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
