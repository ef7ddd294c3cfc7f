from sqlalchemy import Column, String, Integer, Text, ForeignKey
from sqlalchemy.orm import relationship
from portfolio_cms.database import Base
from portfolio_cms.models.base import BaseModel

class Project(BaseModel):
    __tablename__ = "projects"

    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=False)
    image = Column(String(500), nullable=True)
    demo_link = Column(String(500), nullable=True)
    repo_link = Column(String(500), nullable=True)
    order = Column(Integer, nullable=False, default=0)

    technology_rows = relationship(
        "ProjectTechnology",
        back_populates="project",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="ProjectTechnology.id",
    )

    @property
    def technologies(self):
        return [row.name for row in self.technology_rows]

class ProjectTechnology(Base):
    __tablename__ = "project_technologies"

    id = Column(Integer, primary_key=True, index=True)
    project_id = Column(Integer, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(100), nullable=False)

    project = relationship("Project", back_populates="technology_rows")
