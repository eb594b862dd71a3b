import enum

from fastapi import HTTPException, status

class CustomHTTPException(HTTPException):
    def __init__(self, detail: str, status_code: int = 400):
        super().__init__(status_code=status_code, detail=detail)

class AuthError(CustomHTTPException):
    def __init__(self, detail: str = "Access denied", status_code: int = status.HTTP_401_UNAUTHORIZED):
        super().__init__(detail=detail, status_code=status_code)

class ForbiddenError(CustomHTTPException):
    def __init__(self, detail: str = "Instructor access required"):
        super().__init__(detail=detail, status_code=status.HTTP_403_FORBIDDEN)

class InvalidCredentialsError(CustomHTTPException):
    def __init__(self):
        super().__init__(detail="Invalid credentials", status_code=status.HTTP_401_UNAUTHORIZED)

class EmailAlreadyRegisteredError(CustomHTTPException):
    def __init__(self):
        super().__init__(detail="Email already registered", status_code=status.HTTP_400_BAD_REQUEST)

class AlreadyEnrolledError(CustomHTTPException):
    def __init__(self):
        super().__init__(detail="Already enrolled", status_code=status.HTTP_400_BAD_REQUEST)

class EnrollmentNotFoundException(CustomHTTPException):
    def __init__(self, enrollment_id: int = None):
        detail = f"Enrollment with id {enrollment_id} not found" if enrollment_id else "Enrollment not found"
        super().__init__(detail=detail, status_code=status.HTTP_404_NOT_FOUND)

class StoreErrorKind(str, enum.Enum):
    READ = "read"
    WRITE = "write"

STORE_ERROR_RESPONSES = {
    StoreErrorKind.READ: (status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to load data"),
    StoreErrorKind.WRITE: (status.HTTP_400_BAD_REQUEST, "Failed to save data"),
}

class StoreError(CustomHTTPException):
    """Data store failure reported with a fixed message; the raw one is only logged."""

    def __init__(self, kind: StoreErrorKind):
        self.kind = kind
        status_code, detail = STORE_ERROR_RESPONSES[kind]
        super().__init__(detail=detail, status_code=status_code)
