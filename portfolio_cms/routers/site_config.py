from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from portfolio_cms.database import get_db
from portfolio_cms.repositories import content
from portfolio_cms.schemas.site_config import SiteConfigResponse, SiteConfigUpdate

router = APIRouter()
admin_router = APIRouter()

# SiteConfigResponse has no setup_key field, so the key never leaves the server

@router.get("/site-config", response_model=SiteConfigResponse)
def get_site_config(db: Session = Depends(get_db)):
    return content.site_config.get(db)

@admin_router.patch("/site-config", response_model=SiteConfigResponse)
def update_site_config(data: SiteConfigUpdate, db: Session = Depends(get_db)):
    return content.site_config.update(db, data.model_dump(exclude_unset=True))
