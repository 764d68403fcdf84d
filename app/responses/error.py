from fastapi import status
from .base import build_response
from utils.exceptions import AppError


def _failure(status_code: int, error: str):
    return build_response(status_code, {"status": "failure", "error": error})


def bad_request_error(error: str = "Bad request"):
    return _failure(status.HTTP_400_BAD_REQUEST, error)


def internal_server_error(error: str = "Internal server error"):
    return _failure(status.HTTP_500_INTERNAL_SERVER_ERROR, error)


def error_response(exc: AppError):
    return _failure(exc.status_code, exc.message)
