from pydantic import BaseModel, ConfigDict
from typing import Optional
from datetime import date
from .base_schema import RequestModel


class FeedbackCreate(RequestModel):
    Category: Optional[str] = None
    Message: Optional[str] = None
    Rating: Optional[int] = None
    TenantID: Optional[int] = None


class FeedbackResponse(BaseModel):
    FeedbackID: int
    Category: str
    Message: str
    Rating: int
    TenantID: int
    DateSubmitted: Optional[date] = None

    model_config = ConfigDict(from_attributes=True)
