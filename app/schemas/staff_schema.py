from pydantic import BaseModel, ConfigDict
from typing import Optional
from enums.availability_status import AvailabilityStatus as Availability
from .base_schema import RequestModel


class StaffBase(RequestModel):
    name: Optional[str] = None
    role: Optional[str] = None
    contact: Optional[str] = None
    AvailabilityStatus: Optional[str] = Availability.AVAILABLE.value


class StaffCreate(StaffBase):
    StaffID: Optional[int] = None


class StaffUpdate(StaffBase):
    pass


class StaffResponse(BaseModel):
    StaffID: int
    name: str
    role: Optional[str] = None
    contact: Optional[str] = None
    AvailabilityStatus: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)
