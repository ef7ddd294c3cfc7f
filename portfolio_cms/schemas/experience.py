from pydantic import Field
from typing import List, Optional
from datetime import datetime
from portfolio_cms.schemas.base import CamelModel, not_null

class ExperienceBase(CamelModel):
    title: str = Field(..., min_length=1, max_length=200)
    company: str = Field(..., min_length=1, max_length=200)
    location: str = Field(..., min_length=1, max_length=200)
    start_date: str = Field(..., min_length=1, max_length=50)
    end_date: Optional[str] = Field(None, max_length=50)
    description: str = Field(..., min_length=1)
    type: str = Field("Full-time", min_length=1, max_length=50)
    order: int = 0

class ExperienceCreate(ExperienceBase):
    technologies: List[str] = []

class ExperienceUpdate(CamelModel):
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    company: Optional[str] = Field(None, min_length=1, max_length=200)
    location: Optional[str] = Field(None, min_length=1, max_length=200)
    start_date: Optional[str] = Field(None, min_length=1, max_length=50)
    end_date: Optional[str] = Field(None, max_length=50)
    description: Optional[str] = Field(None, min_length=1)
    type: Optional[str] = Field(None, min_length=1, max_length=50)
    order: Optional[int] = None
    technologies: Optional[List[str]] = None

    check_not_null = not_null("title", "company", "location", "start_date", "description", "type", "order")

class ExperienceResponse(ExperienceBase):
    id: int
    technologies: List[str] = []
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
