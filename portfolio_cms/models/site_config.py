from sqlalchemy import Column, String, Text
from portfolio_cms.models.base import BaseModel

DEFAULT_PRIMARY_COLOR = "hsl(222.2 47.4% 11.2%)"

class SiteConfig(BaseModel):
    __tablename__ = "site_config"

    site_name = Column(String(200), nullable=False, default="Portfolio")
    setup_key = Column(String(255), nullable=False)
    primary_color = Column(String(100), nullable=False, default=DEFAULT_PRIMARY_COLOR)
    meta_description = Column(Text, nullable=True)
