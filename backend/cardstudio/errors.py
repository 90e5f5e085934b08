"""Typed action errors and their HTTP rendering."""

from __future__ import annotations

from enum import Enum

from fastapi import Request, status
from fastapi.responses import JSONResponse


class ErrorCode(str, Enum):
    UNAUTHORIZED = "UNAUTHORIZED"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"


_STATUS_BY_CODE = {
    ErrorCode.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.CONFLICT: status.HTTP_409_CONFLICT,
}


class ActionError(Exception):
    """A terminal, caller-facing failure of a profile/design operation."""

    def __init__(self, code: ErrorCode, message: str):
        super().__init__(message)
        self.code = code
        self.message = message

    @property
    def status_code(self) -> int:
        return _STATUS_BY_CODE[self.code]

    @classmethod
    def unauthorized(cls) -> ActionError:
        return cls(
            ErrorCode.UNAUTHORIZED, "You must be signed in to perform this action."
        )

    @classmethod
    def profile_not_found(cls) -> ActionError:
        return cls(ErrorCode.NOT_FOUND, "Profile not found.")

    @classmethod
    def design_not_found(cls) -> ActionError:
        return cls(ErrorCode.NOT_FOUND, "Design not found.")

    @classmethod
    def id_taken(cls, kind: str) -> ActionError:
        return cls(ErrorCode.CONFLICT, f"{kind} id is already in use.")


async def action_error_handler(request: Request, exc: ActionError) -> JSONResponse:
    headers = None
    if exc.code == ErrorCode.UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": {"code": exc.code.value, "message": exc.message}},
        headers=headers,
    )
