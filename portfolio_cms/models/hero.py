from sqlalchemy import Column, String
from portfolio_cms.models.base import BaseModel

class Hero(BaseModel):
    __tablename__ = "hero"

    greeting = Column(String(200), nullable=False, default="Hello, I'm")
    name = Column(String(200), nullable=False, default="John Doe")
    tagline = Column(String(300), nullable=False, default="Full Stack Developer & UI/UX Designer")
