from sqlalchemy import Column, String, Integer, ForeignKey
from sqlalchemy.orm import relationship
from portfolio_cms.models.base import BaseModel

class SkillCategory(BaseModel):
    __tablename__ = "skill_categories"

    name = Column(String(100), nullable=False)
    icon = Column(String(100), nullable=False)

    # Relationships
    skills = relationship(
        "Skill",
        back_populates="category",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Skill.id",
    )

class Skill(BaseModel):
    __tablename__ = "skills"

    name = Column(String(100), nullable=False)
    category_id = Column(Integer, ForeignKey("skill_categories.id", ondelete="CASCADE"), nullable=False, index=True)

    category = relationship("SkillCategory", back_populates="skills")
