from pydantic import BaseModel, Field, field_validator
from pydantic_core import PydanticCustomError

# SQLite INTEGER is a signed 64-bit value
SQLITE_INT_MIN = -2**63
SQLITE_INT_MAX = 2**63 - 1


class StudentBase(BaseModel):
    name: str
    email: str
    age: int = Field(strict=True, ge=SQLITE_INT_MIN, le=SQLITE_INT_MAX)


class StudentCreate(StudentBase):
    """Request body for create and update. Any `id` sent by the client is ignored."""

    @field_validator("name", "email", "age")
    @classmethod
    def check_required(cls, value):
        # empty strings and zero count as absent
        if not value:
            raise PydanticCustomError("required", "field is required")
        return value


class Student(StudentBase):
    id: int


class StudentId(BaseModel):
    id: int


class ErrorResponse(BaseModel):
    Status: str = "Error"
    Error: str
