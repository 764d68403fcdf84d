from decimal import Decimal
from pydantic import BaseModel, ConfigDict
from typing import Optional
from .base_schema import Money, RequestModel


class PropertyBase(RequestModel):
    name: Optional[str] = None
    location: Optional[str] = None
    TotalRooms: Optional[int] = None
    OwnerID: Optional[int] = None


class PropertyCreate(PropertyBase):
    pass


class PropertyUpdate(PropertyBase):
    pass


class PropertyResponse(BaseModel):
    PropertyID: int
    name: str
    location: str
    TotalRooms: int
    OwnerID: int

    model_config = ConfigDict(from_attributes=True)


class RoomBase(RequestModel):
    BedCount: Optional[int] = None
    OccupiedBeds: Optional[int] = 0
    RentAmount: Optional[Decimal] = None
    RoomType: Optional[str] = None
    PropertyID: Optional[int] = None


class RoomCreate(RoomBase):
    pass


class RoomUpdate(RoomBase):
    pass


class RoomResponse(BaseModel):
    RoomID: int
    BedCount: int
    OccupiedBeds: int
    RentAmount: Money
    RoomType: str
    PropertyID: int

    model_config = ConfigDict(from_attributes=True)
