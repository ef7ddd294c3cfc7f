from sqlalchemy import Column, Integer, String, Boolean, DateTime
from sqlalchemy.sql import func
from portfolio_cms.database import Base

class SetupKey(Base):
    """Single-use invitation that lets one more administrator register."""
    __tablename__ = "setup_keys"

    id = Column(Integer, primary_key=True, index=True)
    key = Column(String(255), unique=True, nullable=False, index=True)
    used = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    used_at = Column(DateTime(timezone=True), nullable=True)
