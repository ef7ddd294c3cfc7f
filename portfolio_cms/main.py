import asyncio
import logging
from contextlib import asynccontextmanager
from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from portfolio_cms.config import settings
from portfolio_cms.core.security import require_admin
from portfolio_cms.core.sessions import prune_sessions_periodically
from portfolio_cms.database import SessionLocal, init_db
from portfolio_cms.repositories import content
from portfolio_cms.routers import (
    auth,
    site_config,
    sections,
    skills,
    experiences,
    projects,
    contact,
    setup_keys,
)

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


def seed_site_config():
    db = SessionLocal()
    try:
        _, created = content.site_config.get_or_initialize(db)
        if created:
            source = "DEFAULT_SETUP_KEY" if settings.DEFAULT_SETUP_KEY != "changeme" else "built-in default"
            logger.info(f"Site initialized with setup key from {source}")
    finally:
        db.close()


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    seed_site_config()
    pruner = asyncio.create_task(
        prune_sessions_periodically(SessionLocal, settings.SESSION_PRUNE_INTERVAL_HOURS * 3600)
    )
    yield
    pruner.cancel()


app = FastAPI(
    title="Portfolio CMS",
    description="API for a personal portfolio site and its admin dashboard",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Accept", "Origin", "X-Requested-With"],
    max_age=600,
)


# Error bodies are always {"message": ...}

@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        problems.append(f"{location}: {error.get('msg')}" if location else error.get("msg"))
    return JSONResponse(
        status_code=400,
        content={"message": "Validation error: " + "; ".join(problems)},
    )

@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(status_code=500, content={"message": "Internal server error"})


# Routers
admin_only = [Depends(require_admin)]

app.include_router(auth.router, prefix="/api", tags=["Auth"])
app.include_router(auth.admin_router, prefix="/api/admin", tags=["Auth"], dependencies=admin_only)
app.include_router(site_config.router, prefix="/api", tags=["Site config"])
app.include_router(site_config.admin_router, prefix="/api/admin", tags=["Site config"], dependencies=admin_only)
app.include_router(sections.router, prefix="/api", tags=["Sections"])
app.include_router(sections.admin_router, prefix="/api/admin", tags=["Sections"], dependencies=admin_only)
app.include_router(skills.router, prefix="/api", tags=["Skills"])
app.include_router(skills.admin_router, prefix="/api/admin", tags=["Skills"], dependencies=admin_only)
app.include_router(experiences.router, prefix="/api", tags=["Experience"])
app.include_router(experiences.admin_router, prefix="/api/admin", tags=["Experience"], dependencies=admin_only)
app.include_router(projects.router, prefix="/api", tags=["Projects"])
app.include_router(projects.admin_router, prefix="/api/admin", tags=["Projects"], dependencies=admin_only)
app.include_router(contact.router, prefix="/api", tags=["Contact"])
app.include_router(contact.admin_router, prefix="/api/admin", tags=["Contact"], dependencies=admin_only)
app.include_router(setup_keys.admin_router, prefix="/api/admin", tags=["Setup keys"], dependencies=admin_only)

@app.get("/")
def read_root():
    return {
        "message": "Portfolio CMS API is running",
        "version": "1.0.0"
    }

@app.get("/health")
def health_check():
    return {
        "status": "healthy",
        "service": "Portfolio CMS API",
    }
