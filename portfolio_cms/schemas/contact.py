from pydantic import EmailStr, Field, field_validator
from datetime import datetime
from portfolio_cms.schemas.base import CamelModel

class ContactMessageCreate(CamelModel):
    name: str = Field(..., max_length=200)
    email: EmailStr
    subject: str = Field(..., max_length=300)
    message: str

    @field_validator("name", "subject", "message")
    @classmethod
    def not_blank(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("must not be empty")
        return v

class ContactMessageResponse(CamelModel):
    id: int
    name: str
    email: str
    subject: str
    message: str
    read: bool
    created_at: datetime

class UnreadCount(CamelModel):
    count: int
