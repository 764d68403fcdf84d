from pydantic import BaseModel, ConfigDict
from typing import Optional
from .base_schema import RequestModel


class OwnerBase(RequestModel):
    name: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None


class OwnerCreate(OwnerBase):
    OwnerID: Optional[int] = None


class OwnerUpdate(OwnerBase):
    pass


class OwnerLogin(RequestModel):
    name: Optional[str] = None
    ownerID: Optional[int] = None


class OwnerResponse(BaseModel):
    OwnerID: int
    name: str
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)
