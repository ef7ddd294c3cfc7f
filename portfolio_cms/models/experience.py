from sqlalchemy import Column, String, Integer, Text, ForeignKey
from sqlalchemy.orm import relationship
from portfolio_cms.database import Base
from portfolio_cms.models.base import BaseModel

class Experience(BaseModel):
    __tablename__ = "experiences"

    title = Column(String(200), nullable=False)
    company = Column(String(200), nullable=False)
    location = Column(String(200), nullable=False)
    start_date = Column(String(50), nullable=False)
    end_date = Column(String(50), nullable=True)  # None means "Present"
    description = Column(Text, nullable=False)
    type = Column(String(50), nullable=False, default="Full-time")
    order = Column(Integer, nullable=False, default=0)

    technology_rows = relationship(
        "ExperienceTechnology",
        back_populates="experience",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="ExperienceTechnology.id",
    )

    @property
    def technologies(self):
        return [row.name for row in self.technology_rows]

class ExperienceTechnology(Base):
    __tablename__ = "experience_technologies"

    id = Column(Integer, primary_key=True, index=True)
    experience_id = Column(Integer, ForeignKey("experiences.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(100), nullable=False)

    experience = relationship("Experience", back_populates="technology_rows")
