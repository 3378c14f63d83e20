from fastapi import HTTPException, status


class ApiError(HTTPException):
    """
    Base error for every failure the API reports on purpose.

    `errors` is the field-level list placed under `error` in the response
    envelope, e.g. [{"field": "email", "message": "email is required"}].
    """

    def __init__(self, status_code: int, message: str, errors: list | None = None):
        super().__init__(status_code=status_code, detail=message)
        self.message = message
        self.errors = errors or []


class ValidationError(ApiError):
    def __init__(self, message: str = "Validation failed", errors: list | None = None):
        super().__init__(status.HTTP_400_BAD_REQUEST, message, errors)


class UnauthorizedError(ApiError):
    def __init__(self, message: str = "Unauthorized access"):
        super().__init__(status.HTTP_401_UNAUTHORIZED, message)


class ForbiddenError(ApiError):
    def __init__(self, message: str = "You do not have permission to perform this action"):
        super().__init__(status.HTTP_403_FORBIDDEN, message)


class NotFoundError(ApiError):
    def __init__(self, resource: str = "Resource"):
        super().__init__(status.HTTP_404_NOT_FOUND, f"{resource} not found")
        self.resource = resource


class ConflictError(ApiError):
    def __init__(self, message: str = "Resource conflict", field: str | None = None):
        errors = [{"field": field, "message": message}] if field else []
        super().__init__(status.HTTP_409_CONFLICT, message, errors)
        self.field = field


def field_error(field: str, message: str) -> ValidationError:
    return ValidationError(message, [{"field": field, "message": message}])
