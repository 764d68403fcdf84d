from fastapi import status
from .base import build_response


def success_response(message: str = None, **fields):
    return build_response(status.HTTP_200_OK, {"message": message, **fields})


def created_response(message: str = None, **fields):
    return build_response(status.HTTP_201_CREATED, {"message": message, **fields})


def data_response(data=None):
    return build_response(status.HTTP_200_OK, data)