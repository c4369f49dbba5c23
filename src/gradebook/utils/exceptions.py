# File: src/gradebook/utils/exceptions.py
from fastapi import HTTPException, status


class NotFoundError(HTTPException):
    """Raised when a mutation targets an id that does not exist."""

    def __init__(self, detail: str):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)

    def __str__(self) -> str:
        return self.detail
