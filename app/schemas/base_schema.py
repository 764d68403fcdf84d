from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, PlainSerializer


class RequestModel(BaseModel):
    """Base for request bodies. Unknown keys are rejected, numbers accepted for strings."""

    model_config = ConfigDict(extra="forbid", coerce_numbers_to_str=True)


# Exact in Python, a JSON number on the wire
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


def blank_to_none(value):
    if isinstance(value, str) and not value.strip():
        return None
    return value
