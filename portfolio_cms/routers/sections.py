from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from portfolio_cms.database import get_db
from portfolio_cms.repositories import content
from portfolio_cms.schemas.sections import (
    AboutResponse,
    AboutUpdate,
    ContactInfoResponse,
    ContactInfoUpdate,
    HeroResponse,
    HeroUpdate,
)

router = APIRouter()
admin_router = APIRouter()

# Hero

@router.get("/hero", response_model=HeroResponse)
def get_hero(db: Session = Depends(get_db)):
    return content.hero.get(db)

@admin_router.patch("/hero", response_model=HeroResponse)
def update_hero(data: HeroUpdate, db: Session = Depends(get_db)):
    return content.hero.update(db, data.model_dump(exclude_unset=True))

# About

@router.get("/about", response_model=AboutResponse)
def get_about(db: Session = Depends(get_db)):
    return content.about.get(db)

@admin_router.patch("/about", response_model=AboutResponse)
def update_about(data: AboutUpdate, db: Session = Depends(get_db)):
    return content.about.update(db, data.model_dump(exclude_unset=True))

# Contact info

@router.get("/contact-info", response_model=ContactInfoResponse)
def get_contact_info(db: Session = Depends(get_db)):
    return content.contact_info.get(db)

@admin_router.patch("/contact-info", response_model=ContactInfoResponse)
def update_contact_info(data: ContactInfoUpdate, db: Session = Depends(get_db)):
    return content.contact_info.update(db, data.model_dump(exclude_unset=True))
