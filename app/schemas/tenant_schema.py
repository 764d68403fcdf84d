from pydantic import BaseModel, Field, field_validator
from typing import List, Optional
from datetime import date
from enums.payment_status import PaymentStatus as TenantPaymentStatus
from .base_schema import RequestModel, blank_to_none


class TenantBase(RequestModel):
    firstName: Optional[str] = None
    middleName: Optional[str] = ""
    lastName: Optional[str] = None
    phones: List[str] = Field(default_factory=list)
    emails: List[str] = Field(default_factory=list)
    CheckInDate: Optional[date] = None
    CheckOutDate: Optional[date] = None
    PaymentStatus: Optional[str] = TenantPaymentStatus.PENDING.value
    RoomID: Optional[int] = None
    OwnerID: Optional[int] = None

    @field_validator("CheckInDate", "CheckOutDate", mode="before")
    @classmethod
    def empty_date(cls, v):
        return blank_to_none(v)

    @field_validator("middleName", mode="before")
    @classmethod
    def default_middle_name(cls, v):
        return "" if v is None else v

    @field_validator("PaymentStatus", mode="before")
    @classmethod
    def default_payment_status(cls, v):
        return blank_to_none(v) or TenantPaymentStatus.PENDING.value

    @field_validator("phones", "emails", mode="before")
    @classmethod
    def null_contacts(cls, v):
        return [] if v is None else v


class TenantCreate(TenantBase):
    pass


class TenantUpdate(TenantBase):
    pass


class TenantStatusUpdate(RequestModel):
    PaymentStatus: Optional[str] = None


class TenantLogin(RequestModel):
    name: Optional[str] = None
    tenantID: Optional[int] = None


class TenantResponse(BaseModel):
    """Assembled tenant: core record, name record and joined contact lists."""

    TenantID: int
    FirstName: Optional[str] = None
    MiddleName: Optional[str] = None
    LastName: Optional[str] = None
    CheckInDate: Optional[date] = None
    CheckOutDate: Optional[date] = None
    PaymentStatus: Optional[str] = None
    RoomID: Optional[int] = None
    OwnerID: Optional[int] = None
    Phones: str = ""
    Emails: str = ""
    Contact: str = ""
    Email: str = ""


class TenantDetailResponse(TenantResponse):
    FullName: Optional[str] = None
