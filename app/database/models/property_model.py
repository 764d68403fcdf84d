from sqlalchemy import Column, Integer, String, Numeric, ForeignKey
from database.init import Base


class Property(Base):
    __tablename__ = "Property"

    PropertyID = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False, index=True)
    location = Column(String(255), nullable=False)
    TotalRooms = Column(Integer, nullable=False)
    OwnerID = Column(Integer, ForeignKey("Owner.OwnerID"), nullable=False)


class Room(Base):
    __tablename__ = "Room"

    RoomID = Column(Integer, primary_key=True, autoincrement=True)
    BedCount = Column(Integer, nullable=False)
    OccupiedBeds = Column(Integer, nullable=False, default=0)
    RentAmount = Column(Numeric(10, 2), nullable=False)
    RoomType = Column(String(50), nullable=False)
    PropertyID = Column(Integer, ForeignKey("Property.PropertyID"), nullable=False)
