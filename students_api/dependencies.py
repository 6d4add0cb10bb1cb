from fastapi import Request

from students_api.database import Storage


def get_storage(request: Request) -> Storage:
    """The Storage instance created at startup, shared by every request."""
    return request.app.state.storage
