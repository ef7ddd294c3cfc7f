from pydantic import EmailStr, Field
from typing import Optional
from datetime import datetime
from portfolio_cms.schemas.base import CamelModel

class Login(CamelModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)

class Register(CamelModel):
    username: str = Field(..., min_length=3, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=6)
    is_admin: bool = False
    setup_key: Optional[str] = None

class UserResponse(CamelModel):
    """A user as clients see it; the password hash is never part of it."""
    id: int
    username: str
    email: str
    is_admin: bool
    created_at: Optional[datetime] = None

class MessageResponse(CamelModel):
    message: str
