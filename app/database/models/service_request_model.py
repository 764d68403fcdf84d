from sqlalchemy import Column, Integer, String, Text, Date, ForeignKey
from database.init import Base
from enums.service_request_status import ServiceRequestStatus


class ServiceRequest(Base):
    __tablename__ = "ServiceRequest"

    RequestID = Column(Integer, primary_key=True, autoincrement=True)
    Category = Column(String(50), nullable=False)
    Description = Column(Text, nullable=False)
    Status = Column(String(20), nullable=False, default=ServiceRequestStatus.PENDING.value)
    DateRaised = Column(Date, nullable=False)
    DateResolved = Column(Date, nullable=True)
    TenantID = Column(Integer, ForeignKey("Tenant.TenantID"), nullable=False)
    StaffID = Column(Integer, ForeignKey("Staff.StaffID"), nullable=True)
