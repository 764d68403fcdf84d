from typing import Iterable, List

from pydantic import BaseModel

from utils.exceptions import ValidationError


def missing_fields(payload: BaseModel, fields: Iterable[str]) -> List[str]:
    """Names of fields that are absent or falsy on the payload."""
    return [name for name in fields if not getattr(payload, name, None)]


def require_fields(payload: BaseModel, fields: Iterable[str], message: str) -> None:
    if missing_fields(payload, fields):
        raise ValidationError(message)


def unique(values: Iterable[str]) -> List[str]:
    """Drop duplicates and blanks, first occurrence wins."""
    return list(dict.fromkeys(v for v in values if v))
