from pydantic import Field
from typing import List, Optional
from datetime import datetime
from portfolio_cms.schemas.base import CamelModel, not_null

class ProjectBase(CamelModel):
    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1)
    image: Optional[str] = Field(None, max_length=500)
    demo_link: Optional[str] = Field(None, max_length=500)
    repo_link: Optional[str] = Field(None, max_length=500)
    order: int = 0

class ProjectCreate(ProjectBase):
    technologies: List[str] = []

class ProjectUpdate(CamelModel):
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = Field(None, min_length=1)
    image: Optional[str] = Field(None, max_length=500)
    demo_link: Optional[str] = Field(None, max_length=500)
    repo_link: Optional[str] = Field(None, max_length=500)
    order: Optional[int] = None
    technologies: Optional[List[str]] = None

    check_not_null = not_null("title", "description", "order")

class ProjectResponse(ProjectBase):
    id: int
    technologies: List[str] = []
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
