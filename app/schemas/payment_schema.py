from pydantic import BaseModel, ConfigDict
from typing import Optional
from datetime import datetime
from .base_schema import Money, RequestModel


class PaymentCreate(RequestModel):
    TenantID: Optional[int] = None
    PaymentMode: Optional[str] = None


class PaymentResponse(BaseModel):
    PaymentID: int
    TenantID: int
    Amount: Money
    Date: Optional[datetime] = None
    PaymentMode: Optional[str] = None
    Status: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)
