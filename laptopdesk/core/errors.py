# laptopdesk/core/errors.py
#
# Error taxonomy shared by the store, the services and the HTTP layer.
# Each error carries the status code the API answers with.

from fastapi import status


class AppError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class Unauthorized(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED


class NotFound(AppError):
    status_code = status.HTTP_404_NOT_FOUND


class InvalidInput(AppError):
    status_code = status.HTTP_400_BAD_REQUEST


class InvalidState(AppError):
    status_code = status.HTTP_400_BAD_REQUEST


class StorageFailure(AppError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
