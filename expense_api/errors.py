from fastapi import HTTPException, status

_BEARER = {"WWW-Authenticate": "Bearer"}


class Unauthorized(HTTPException):
    """No bearer credential on the request."""

    def __init__(self) -> None:
        super().__init__(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized", headers=_BEARER)


class InvalidToken(HTTPException):
    """Credential present but malformed, badly signed or expired."""

    def __init__(self) -> None:
        super().__init__(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token", headers=_BEARER)


class NotFound(HTTPException):
    """No row matched (id, owner). Absent and foreign records look the same."""

    def __init__(self, detail: str = "Expense not found") -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class StorageFailure(HTTPException):
    """Backend error, reported with a generic message only."""

    def __init__(self, detail: str) -> None:
        super().__init__(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)
