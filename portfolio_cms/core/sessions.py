"""
Server-side sessions.

A session is a row in ``user_sessions`` keyed by a random token. The browser
only holds that token, signed with SECRET_KEY, in an HttpOnly cookie. Anything
that does not resolve to a live row and an existing user (bad signature,
expired or deleted row, deleted user) is treated as an anonymous visitor.
"""
import asyncio
import logging
import secrets
from datetime import datetime, timedelta, timezone
from typing import Optional
from fastapi import Response
from fastapi.security import APIKeyCookie
from jose import JWTError, jwt
from sqlalchemy.orm import Session
from starlette.concurrency import run_in_threadpool
from portfolio_cms.config import settings
from portfolio_cms.models.session import UserSession
from portfolio_cms.models.user import User

logger = logging.getLogger(__name__)

if settings.SECRET_KEY:
    SECRET_KEY = settings.SECRET_KEY
else:
    logger.warning("SECRET_KEY not set, using a random value. Sessions will be reset on server restart.")
    SECRET_KEY = secrets.token_hex(32)

ALGORITHM = settings.ALGORITHM
SESSION_MAX_AGE = timedelta(hours=settings.SESSION_MAX_AGE_HOURS)

session_cookie = APIKeyCookie(name=settings.SESSION_COOKIE_NAME, auto_error=False)

def utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)

def sign_session_id(session_id: str, expires_at: datetime) -> str:
    to_encode = {"sid": session_id, "exp": expires_at.replace(tzinfo=timezone.utc)}
    return jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)

def read_session_id(token: str) -> Optional[str]:
    try:
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
    except JWTError:
        return None
    return payload.get("sid")

def create_session(db: Session, user: User) -> str:
    """Persist a new session for ``user`` and return the signed cookie value."""
    now = utcnow()
    row = UserSession(
        id=secrets.token_urlsafe(32),
        user_id=user.id,
        created_at=now,
        expires_at=now + SESSION_MAX_AGE,
    )
    db.add(row)
    db.commit()
    return sign_session_id(row.id, row.expires_at)

def restore_user(db: Session, token: Optional[str]) -> Optional[User]:
    if not token:
        return None

    session_id = read_session_id(token)
    if session_id is None:
        return None

    row = db.get(UserSession, session_id)
    if row is None:
        return None
    if row.expires_at <= utcnow():
        db.delete(row)
        db.commit()
        return None

    return db.get(User, row.user_id)

def destroy_session(db: Session, token: Optional[str]) -> None:
    if not token:
        return
    session_id = read_session_id(token)
    if session_id is None:
        return
    db.query(UserSession).filter(UserSession.id == session_id).delete(synchronize_session=False)
    db.commit()

def prune_expired_sessions(db: Session) -> int:
    removed = db.query(UserSession).filter(UserSession.expires_at <= utcnow()).delete(synchronize_session=False)
    db.commit()
    return removed

def set_session_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=token,
        max_age=int(SESSION_MAX_AGE.total_seconds()),
        httponly=True,
        secure=settings.COOKIE_SECURE,
        samesite="lax",
    )

def clear_session_cookie(response: Response) -> None:
    response.delete_cookie(
        key=settings.SESSION_COOKIE_NAME,
        httponly=True,
        secure=settings.COOKIE_SECURE,
        samesite="lax",
    )

def _prune_once(session_factory) -> int:
    db = session_factory()
    try:
        return prune_expired_sessions(db)
    finally:
        db.close()

async def prune_sessions_periodically(session_factory, interval_seconds: float) -> None:
    """Runs for the lifetime of the app; cancelled on shutdown."""
    while True:
        await asyncio.sleep(interval_seconds)
        try:
            removed = await run_in_threadpool(_prune_once, session_factory)
            logger.info(f"Pruned {removed} expired sessions")
        except Exception:
            logger.exception("Session pruning failed")
