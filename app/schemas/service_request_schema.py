from pydantic import BaseModel, ConfigDict, field_validator
from typing import Optional
from datetime import date
from .base_schema import RequestModel, blank_to_none


class ServiceRequestCreate(RequestModel):
    Category: Optional[str] = None
    Description: Optional[str] = None
    TenantID: Optional[int] = None
    DateRaised: Optional[date] = None

    @field_validator("DateRaised", mode="before")
    @classmethod
    def empty_date(cls, v):
        return blank_to_none(v)


class ServiceRequestUpdate(RequestModel):
    """Status and/or staff assignment. An explicit null StaffID unassigns."""

    Status: Optional[str] = None
    StaffID: Optional[int] = None


class ServiceRequestResolve(RequestModel):
    DateResolved: Optional[date] = None
    StaffID: Optional[int] = None

    @field_validator("DateResolved", mode="before")
    @classmethod
    def empty_date(cls, v):
        return blank_to_none(v)


class ServiceRequestResponse(BaseModel):
    RequestID: int
    Category: str
    Description: str
    Status: str
    DateRaised: Optional[date] = None
    DateResolved: Optional[date] = None
    TenantID: int
    StaffID: Optional[int] = None

    model_config = ConfigDict(from_attributes=True)


class ServiceRequestListItem(BaseModel):
    RequestID: int
    Category: str
    Description: str
    Status: str
    DateRaised: Optional[date] = None
    DateResolved: Optional[date] = None
    TenantID: int
    TenantName: Optional[str] = None
    RoomID: Optional[int] = None
    OwnerID: Optional[int] = None
    StaffID: Optional[int] = None
    StaffName: Optional[str] = None
    StaffContact: Optional[str] = None
    StaffRole: Optional[str] = None
