from sqlalchemy import Column, String, Boolean
from sqlalchemy.orm import relationship
from portfolio_cms.models.base import BaseModel

class User(BaseModel):
    __tablename__ = "users"

    username = Column(String(100), unique=True, nullable=False, index=True)
    email = Column(String(150), unique=True, nullable=False, index=True)
    # "<derived key hex>.<salt hex>", see core.security.get_password_hash
    password = Column(String(255), nullable=False)
    is_admin = Column(Boolean, nullable=False, default=False)

    sessions = relationship("UserSession", back_populates="user", cascade="all, delete-orphan", passive_deletes=True)
