from sqlalchemy import Column, Integer, String
from database.init import Base
from enums.availability_status import AvailabilityStatus as Availability


class Staff(Base):
    __tablename__ = "Staff"

    StaffID = Column(Integer, primary_key=True, autoincrement=False)
    name = Column(String(100), nullable=False, index=True)
    role = Column(String(50), nullable=False)
    contact = Column(String(50), nullable=False)
    AvailabilityStatus = Column(
        String(20), nullable=False, default=Availability.AVAILABLE.value
    )
