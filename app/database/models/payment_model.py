from sqlalchemy import Column, Integer, String, Numeric, DateTime, ForeignKey
from datetime import datetime

from database.init import Base
from enums.payment_status import PaymentStatus


class Payment(Base):
    __tablename__ = "Payment"

    PaymentID = Column(Integer, primary_key=True, autoincrement=True)
    TenantID = Column(Integer, ForeignKey("Tenant.TenantID"), nullable=False)
    Amount = Column(Numeric(10, 2), nullable=False)
    Date = Column(DateTime, nullable=False, default=datetime.now)
    PaymentMode = Column(String(50), nullable=False)
    Status = Column(String(20), nullable=False, default=PaymentStatus.PAID.value)
