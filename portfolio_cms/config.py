# portfolio_cms/config.py

from pydantic_settings import BaseSettings
from typing import List, Optional

class Settings(BaseSettings):
    # Database
    DATABASE_URL: str

    # Sessions
    SECRET_KEY: Optional[str] = None
    ALGORITHM: str = "HS256"
    SESSION_COOKIE_NAME: str = "portfolio_session"
    SESSION_MAX_AGE_HOURS: int = 24
    SESSION_PRUNE_INTERVAL_HOURS: int = 24
    COOKIE_SECURE: bool = False

    # Bootstrap admin
    DEFAULT_SETUP_KEY: str = "changeme"

    # Email
    EMAIL_FROM: str = "portfolio@example.com"
    RESEND_API_KEY: Optional[str] = None
    EMAIL_SERVICE_URL: Optional[str] = None
    EMAIL_API_KEY: Optional[str] = None
    SMTP_HOST: Optional[str] = None
    SMTP_PORT: int = 587
    SMTP_USER: Optional[str] = None
    SMTP_PASSWORD: Optional[str] = None
    SMTP_SECURE: bool = False

    # CORS
    FRONTEND_URLS: str = "http://localhost:5173,http://localhost:3000"

    LOG_LEVEL: str = "INFO"

    @property
    def allowed_origins(self) -> List[str]:
        """FRONTEND_URLS as CORS origins; a browser Origin header has no trailing slash."""
        origins = []
        for url in self.FRONTEND_URLS.split(","):
            origin = url.strip().rstrip("/")
            if origin and origin not in origins:
                origins.append(origin)
        return origins

    @property
    def smtp_configured(self) -> bool:
        return bool(self.SMTP_HOST and self.SMTP_USER and self.SMTP_PASSWORD)

    class Config:
        env_file = ".env"

settings = Settings()
