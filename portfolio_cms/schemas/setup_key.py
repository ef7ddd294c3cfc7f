from pydantic import Field
from typing import Optional
from datetime import datetime
from portfolio_cms.schemas.base import CamelModel

class SetupKeyCreate(CamelModel):
    # Omit to have a random key generated
    key: Optional[str] = Field(None, min_length=8, max_length=255)

class SetupKeyResponse(CamelModel):
    id: int
    key: str
    used: bool
    created_at: Optional[datetime] = None
    used_at: Optional[datetime] = None
