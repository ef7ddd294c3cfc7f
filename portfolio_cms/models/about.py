from sqlalchemy import Column, String, Text, JSON
from portfolio_cms.models.base import BaseModel

class About(BaseModel):
    __tablename__ = "about"

    bio = Column(Text, nullable=False)
    additional_info = Column(Text, nullable=True)
    profile_image = Column(String(500), nullable=True)
    details = Column(JSON, nullable=True)       # [{icon, label, value}]
    social_links = Column(JSON, nullable=True)  # [{platform, url, icon}]
