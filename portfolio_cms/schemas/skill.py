from pydantic import Field
from typing import Optional
from datetime import datetime
from portfolio_cms.schemas.base import CamelModel, not_null

class SkillCategoryBase(CamelModel):
    name: str = Field(..., min_length=1, max_length=100)
    icon: str = Field(..., min_length=1, max_length=100)

class SkillCategoryCreate(SkillCategoryBase):
    pass

class SkillCategoryUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    icon: Optional[str] = Field(None, min_length=1, max_length=100)

    check_not_null = not_null("name", "icon")

class SkillCategoryResponse(SkillCategoryBase):
    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

class SkillBase(CamelModel):
    name: str = Field(..., min_length=1, max_length=100)
    category_id: int

class SkillCreate(SkillBase):
    pass

class SkillUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    category_id: Optional[int] = None

    check_not_null = not_null("name", "category_id")

class SkillResponse(SkillBase):
    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
