from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from decimal import Decimal
from typing import Any


def _serialize(data: Any) -> Any:
    if isinstance(data, BaseModel):
        return data.model_dump(mode="json")
    if isinstance(data, list) and all(isinstance(item, BaseModel) for item in data):
        return [item.model_dump(mode="json") for item in data]
    # Numeric columns come back from the driver as Decimal
    return jsonable_encoder(data, custom_encoder={Decimal: float})


def build_response(status_code: int, content: Any = None) -> JSONResponse:
    return JSONResponse(
        content=_serialize(content),
        status_code=status_code,
        media_type="application/json",
    )
