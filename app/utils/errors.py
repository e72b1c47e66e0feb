"""Errors raised by services and rendered by the application error handlers."""

from typing import Optional


class ServiceError(Exception):
    code = "BAD_REQUEST"
    status = 400

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        if code:
            self.code = code


class InvalidRequestError(ServiceError):
    code = "VALIDATION_ERROR"
    status = 400


class NotFoundError(ServiceError):
    code = "NOT_FOUND"
    status = 404


class ConflictError(ServiceError):
    code = "CONFLICT"
    status = 409
