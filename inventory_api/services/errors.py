from __future__ import annotations


class ServiceError(Exception):
    """Base business error; the HTTP layer maps it to `status_code` + {"error": message}."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BadRequestError(ServiceError):
    """Missing/invalid fields, invalid state transition, insufficient stock."""
    status_code = 400


class NotFoundError(ServiceError):
    """Unknown product or order id."""
    status_code = 404


class InternalError(ServiceError):
    status_code = 500
