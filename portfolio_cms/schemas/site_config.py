from pydantic import Field
from typing import Optional
from datetime import datetime
from portfolio_cms.schemas.base import CamelModel, not_null

class SiteConfigUpdate(CamelModel):
    site_name: Optional[str] = Field(None, min_length=1, max_length=200)
    primary_color: Optional[str] = Field(None, min_length=1, max_length=100)
    meta_description: Optional[str] = None
    setup_key: Optional[str] = Field(None, min_length=6, max_length=255)

    check_not_null = not_null("site_name", "primary_color", "setup_key")

class SiteConfigResponse(CamelModel):
    # no setup_key: it must never leave the server
    id: int
    site_name: str
    primary_color: str
    meta_description: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
