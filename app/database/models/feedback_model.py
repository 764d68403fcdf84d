from sqlalchemy import Column, Integer, String, Text, Date, ForeignKey
from datetime import date

from database.init import Base


class Feedback(Base):
    __tablename__ = "Feedback"

    FeedbackID = Column(Integer, primary_key=True, autoincrement=True)
    Category = Column(String(50), nullable=False)
    Message = Column(Text, nullable=False)
    Rating = Column(Integer, nullable=False)
    TenantID = Column(Integer, ForeignKey("Tenant.TenantID"), nullable=False)
    DateSubmitted = Column(Date, nullable=False, default=date.today)
