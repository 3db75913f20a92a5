from fastapi import HTTPException, status


class JustAIError(HTTPException):
    """Base class for errors rendered as ``{"message": ..., "code": ...}``."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    code = "ERROR"
    default_message = "Something went wrong."

    def __init__(self, message: str | None = None, headers: dict | None = None):
        super().__init__(
            status_code=self.status_code,
            detail=message or self.default_message,
            headers=headers,
        )


class ValidationError(JustAIError):
    status_code = status.HTTP_400_BAD_REQUEST
    code = "VALIDATION_ERROR"
    default_message = "All fields are required."


class AuthError(JustAIError):
    status_code = status.HTTP_400_BAD_REQUEST
    code = "INVALID_CREDENTIALS"
    default_message = "Invalid email or password."


class UnauthorizedError(JustAIError):
    status_code = status.HTTP_401_UNAUTHORIZED
    code = "UNAUTHORIZED"
    default_message = "Access token required."

    def __init__(self, message: str | None = None):
        super().__init__(message, headers={"WWW-Authenticate": "Bearer"})


class ForbiddenError(JustAIError):
    status_code = status.HTTP_403_FORBIDDEN
    code = "FORBIDDEN"
    default_message = "Invalid or expired token."


class ConflictError(JustAIError):
    status_code = status.HTTP_400_BAD_REQUEST
    code = "CONFLICT"
    default_message = "Email already registered."


class NotFoundError(JustAIError):
    status_code = status.HTTP_404_NOT_FOUND
    code = "NOT_FOUND"
    default_message = "User not found."


class InternalError(JustAIError):
    code = "INTERNAL_ERROR"
    default_message = "Internal server error."
