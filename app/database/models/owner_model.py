from sqlalchemy import Column, Integer, String
from database.init import Base


class Owner(Base):
    __tablename__ = "Owner"

    OwnerID = Column(Integer, primary_key=True, autoincrement=False)
    name = Column(String(100), nullable=False, index=True)
    phone = Column(String(20), nullable=False)
    email = Column(String(100), nullable=False)
    address = Column(String(255), nullable=False)
