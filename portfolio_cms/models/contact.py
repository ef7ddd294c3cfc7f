from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime, JSON
from sqlalchemy.sql import func
from portfolio_cms.database import Base
from portfolio_cms.models.base import BaseModel

class ContactInfo(BaseModel):
    __tablename__ = "contact_info"

    description = Column(Text, nullable=True)
    email = Column(String(150), nullable=True)  # where contact form notifications go
    phone = Column(String(50), nullable=True)
    location = Column(String(200), nullable=True)
    social_links = Column(JSON, nullable=True)

class ContactMessage(Base):
    __tablename__ = "contact_messages"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(200), nullable=False)
    email = Column(String(150), nullable=False)
    subject = Column(String(300), nullable=False)
    message = Column(Text, nullable=False)
    read = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
