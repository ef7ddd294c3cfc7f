from pydantic import EmailStr, Field, field_validator
from typing import List, Optional
from datetime import datetime
from portfolio_cms.schemas.base import CamelModel, not_null

class Detail(CamelModel):
    icon: str
    label: str
    value: str

class SocialLink(CamelModel):
    platform: str = Field(..., min_length=1)
    url: str = Field(..., min_length=1)
    icon: str

# Hero

class HeroUpdate(CamelModel):
    greeting: Optional[str] = Field(None, min_length=1, max_length=200)
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    tagline: Optional[str] = Field(None, min_length=1, max_length=300)

    check_not_null = not_null("greeting", "name", "tagline")

class HeroResponse(CamelModel):
    id: int
    greeting: str
    name: str
    tagline: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

# About

class AboutUpdate(CamelModel):
    bio: Optional[str] = Field(None, min_length=1)
    additional_info: Optional[str] = None
    profile_image: Optional[str] = None
    details: Optional[List[Detail]] = None
    social_links: Optional[List[SocialLink]] = None

    check_not_null = not_null("bio")

class AboutResponse(CamelModel):
    id: int
    bio: str
    additional_info: Optional[str] = None
    profile_image: Optional[str] = None
    details: List[Detail] = []
    social_links: List[SocialLink] = []
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @field_validator("details", "social_links", mode="before")
    @classmethod
    def empty_list_when_unset(cls, v):
        return v or []

# Contact info

class ContactInfoUpdate(CamelModel):
    description: Optional[str] = None
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(None, max_length=50)
    location: Optional[str] = Field(None, max_length=200)
    social_links: Optional[List[SocialLink]] = None

class ContactInfoResponse(CamelModel):
    id: int
    description: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    location: Optional[str] = None
    social_links: List[SocialLink] = []
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @field_validator("social_links", mode="before")
    @classmethod
    def empty_list_when_unset(cls, v):
        return v or []
