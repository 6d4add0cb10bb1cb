"""Error hierarchy for the students API.

Every error carries the HTTP status it is answered with and renders to the
same `{"Status": "Error", "Error": <message>}` envelope.
"""

from typing import List

from fastapi import status


class StudentsAPIError(Exception):
    http_status = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_response(self) -> dict:
        return {"Status": "Error", "Error": self.message}


# ---------------------------------------------------------
# CLIENT ERRORS (400)
# ---------------------------------------------------------
class EmptyBodyError(StudentsAPIError):
    http_status = status.HTTP_400_BAD_REQUEST

    def __init__(self):
        super().__init__("empty body")


class DecodeError(StudentsAPIError):
    http_status = status.HTTP_400_BAD_REQUEST

    def __init__(self, detail: str):
        super().__init__(f"decode error: {detail}")


class ValidationError(StudentsAPIError):
    """One message per failing field, joined with ', '."""

    http_status = status.HTTP_400_BAD_REQUEST

    def __init__(self, messages: List[str]):
        super().__init__(", ".join(messages))
        self.messages = messages


class InvalidIdError(StudentsAPIError):
    http_status = status.HTTP_400_BAD_REQUEST

    def __init__(self, raw_id):
        super().__init__(f"invalid student id: {raw_id!r}")
        self.raw_id = raw_id


# ---------------------------------------------------------
# STORAGE ERRORS (500)
# ---------------------------------------------------------
class StorageError(StudentsAPIError):
    pass


class NotFoundError(StorageError):
    # answered with 500 like any other storage fault
    pass
