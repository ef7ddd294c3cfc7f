from fastapi import APIRouter, Depends, status
from typing import List
from sqlalchemy.orm import Session
from portfolio_cms.database import get_db
from portfolio_cms.repositories import content
from portfolio_cms.schemas.skill import (
    SkillCategoryCreate,
    SkillCategoryResponse,
    SkillCategoryUpdate,
    SkillCreate,
    SkillResponse,
    SkillUpdate,
)

router = APIRouter()
admin_router = APIRouter()

# Skill categories

@router.get("/skill-categories", response_model=List[SkillCategoryResponse])
def get_skill_categories(db: Session = Depends(get_db)):
    return content.skill_categories.get_all(db)

@router.get("/skill-categories/{category_id}", response_model=SkillCategoryResponse)
def get_skill_category(category_id: int, db: Session = Depends(get_db)):
    return content.skill_categories.get(db, category_id)

@admin_router.post("/skill-categories", response_model=SkillCategoryResponse, status_code=status.HTTP_201_CREATED)
def create_skill_category(data: SkillCategoryCreate, db: Session = Depends(get_db)):
    return content.skill_categories.create(db, data.model_dump())

@admin_router.patch("/skill-categories/{category_id}", response_model=SkillCategoryResponse)
def update_skill_category(category_id: int, data: SkillCategoryUpdate, db: Session = Depends(get_db)):
    return content.skill_categories.update(db, category_id, data.model_dump(exclude_unset=True))

@admin_router.delete("/skill-categories/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_skill_category(category_id: int, db: Session = Depends(get_db)):
    """Also removes every skill in the category."""
    content.skill_categories.delete(db, category_id)
    return None

# Skills

@router.get("/skills", response_model=List[SkillResponse])
def get_skills(db: Session = Depends(get_db)):
    return content.skills.get_all(db)

@router.get("/skills/{skill_id}", response_model=SkillResponse)
def get_skill(skill_id: int, db: Session = Depends(get_db)):
    return content.skills.get(db, skill_id)

@admin_router.post("/skills", response_model=SkillResponse, status_code=status.HTTP_201_CREATED)
def create_skill(data: SkillCreate, db: Session = Depends(get_db)):
    return content.skills.create(db, data.model_dump())

@admin_router.patch("/skills/{skill_id}", response_model=SkillResponse)
def update_skill(skill_id: int, data: SkillUpdate, db: Session = Depends(get_db)):
    return content.skills.update(db, skill_id, data.model_dump(exclude_unset=True))

@admin_router.delete("/skills/{skill_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_skill(skill_id: int, db: Session = Depends(get_db)):
    content.skills.delete(db, skill_id)
    return None
