"""
Error Taxonomy
HTTP-aware errors raised by services and rendered by FastAPI as {"detail": ...}
"""

from fastapi import HTTPException, status


class ValidationError(HTTPException):
    """Required field missing or malformed"""

    def __init__(self, detail: str):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class ConflictError(HTTPException):
    """Unique constraint violation"""

    def __init__(self, detail: str):
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)


class NotFoundError(HTTPException):
    """Update/delete/read of an id that does not exist"""

    def __init__(self, detail: str = "Not Found"):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class UpstreamFailure(HTTPException):
    """Backing store unreachable or query failed"""

    def __init__(self, detail: str):
        super().__init__(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)


def is_unique_violation(exc: Exception) -> bool:
    """True when a driver error reports a unique constraint (sqlite or postgres)"""
    return "unique" in str(exc).lower()
