import logging
from typing import Optional
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from portfolio_cms.core.security import get_current_user
from portfolio_cms.core.sessions import (
    clear_session_cookie,
    create_session,
    destroy_session,
    session_cookie,
    set_session_cookie,
)
from portfolio_cms.database import get_db
from portfolio_cms.models.user import User
from portfolio_cms.schemas.auth import Login, MessageResponse, Register, UserResponse
from portfolio_cms.services import auth_service

logger = logging.getLogger(__name__)

router = APIRouter()
admin_router = APIRouter()

@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def register(data: Register, response: Response, db: Session = Depends(get_db)):
    """Create an account and log it in straight away."""
    user = auth_service.register(db, data)
    set_session_cookie(response, create_session(db, user))
    return user

@router.post("/login", response_model=UserResponse)
def login(data: Login, response: Response, db: Session = Depends(get_db)):
    user = auth_service.authenticate(db, data.username, data.password)
    set_session_cookie(response, create_session(db, user))
    logger.info(f"User '{user.username}' logged in")
    return user

@router.post("/logout", response_model=MessageResponse)
def logout(
    response: Response,
    token: Optional[str] = Depends(session_cookie),
    db: Session = Depends(get_db)
):
    destroy_session(db, token)
    clear_session_cookie(response)
    return {"message": "Logged out"}

@router.get("/user", response_model=UserResponse)
def get_user(current_user: User = Depends(get_current_user)):
    return current_user

@admin_router.get("/check", response_model=MessageResponse)
def check_admin():
    return {"message": "Admin access granted"}
