from fastapi import APIRouter, Depends, status
from typing import List
from sqlalchemy.orm import Session
from portfolio_cms.database import get_db
from portfolio_cms.repositories import content
from portfolio_cms.schemas.experience import ExperienceCreate, ExperienceResponse, ExperienceUpdate

router = APIRouter()
admin_router = APIRouter()

@router.get("/experiences", response_model=List[ExperienceResponse])
def get_experiences(db: Session = Depends(get_db)):
    return content.experiences.get_all(db)

@router.get("/experiences/{experience_id}", response_model=ExperienceResponse)
def get_experience(experience_id: int, db: Session = Depends(get_db)):
    return content.experiences.get(db, experience_id)

@admin_router.post("/experiences", response_model=ExperienceResponse, status_code=status.HTTP_201_CREATED)
def create_experience(data: ExperienceCreate, db: Session = Depends(get_db)):
    return content.experiences.create(db, data.model_dump())

@admin_router.patch("/experiences/{experience_id}", response_model=ExperienceResponse)
def update_experience(experience_id: int, data: ExperienceUpdate, db: Session = Depends(get_db)):
    """Sending ``technologies`` replaces the whole list."""
    return content.experiences.update(db, experience_id, data.model_dump(exclude_unset=True))

@admin_router.delete("/experiences/{experience_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_experience(experience_id: int, db: Session = Depends(get_db)):
    content.experiences.delete(db, experience_id)
    return None
