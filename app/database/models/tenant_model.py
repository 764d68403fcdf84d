from sqlalchemy import Column, Integer, String, Date, ForeignKey
from database.init import Base
from enums.payment_status import PaymentStatus as TenantPaymentStatus


class Tenant(Base):
    __tablename__ = "Tenant"

    TenantID = Column(Integer, primary_key=True, autoincrement=True)
    CheckInDate = Column(Date, nullable=False)
    CheckOutDate = Column(Date, nullable=True)
    PaymentStatus = Column(String(20), nullable=False, default=TenantPaymentStatus.PENDING.value)
    RoomID = Column(Integer, ForeignKey("Room.RoomID"), nullable=False)
    OwnerID = Column(Integer, ForeignKey("Owner.OwnerID"), nullable=False)


class TenantName(Base):
    __tablename__ = "Tenant_Name"

    TenantID = Column(Integer, ForeignKey("Tenant.TenantID"), primary_key=True)
    FirstName = Column(String(50), nullable=False)
    MiddleName = Column(String(50), nullable=True)
    LastName = Column(String(50), nullable=False)


class TenantPhone(Base):
    __tablename__ = "tenant_Phone"

    TenantID = Column(Integer, ForeignKey("Tenant.TenantID"), primary_key=True)
    tenant_Phone = Column(String(20), primary_key=True)


class TenantEmail(Base):
    __tablename__ = "tenant_Email"

    TenantID = Column(Integer, ForeignKey("Tenant.TenantID"), primary_key=True)
    tenant_Email = Column(String(100), primary_key=True)
