from fastapi import HTTPException, status


# Business outcomes, rendered by FastAPI as {"detail": ...}
class ValidationError(HTTPException):
    def __init__(self, detail: str = "Missing required fields"):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=detail,
        )

class NotFoundError(HTTPException):
    def __init__(self, detail: str = "Appointment not found"):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=detail,
        )

class ForbiddenError(HTTPException):
    def __init__(self, detail: str = "Only cancelled appointments can be deleted"):
        super().__init__(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=detail,
        )

class DuplicateError(HTTPException):
    def __init__(self, detail: str = "Resource already exists"):
        super().__init__(
            status_code=status.HTTP_409_CONFLICT,
            detail=detail,
        )

class InvalidCredentialsError(HTTPException):
    def __init__(self, detail: str = "Invalid credentials"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
        )


# Persistence failures
class StoreError(Exception):
    """The persistence layer failed; the operation left no partial state."""

class ConflictError(StoreError):
    """Another writer took the token number this request computed."""

    def __init__(self, doctor_code: str, token_number: int):
        self.doctor_code = doctor_code
        self.token_number = token_number
        super().__init__(
            f"Token {token_number} already taken for doctor {doctor_code}"
        )
