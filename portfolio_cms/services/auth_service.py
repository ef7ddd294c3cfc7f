import hmac
import logging
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from portfolio_cms.core.exceptions import AuthException, ConflictException, ForbiddenException, ValidationException
from portfolio_cms.core.security import DUMMY_PASSWORD_HASH, get_password_hash, verify_password
from portfolio_cms.models.user import User
from portfolio_cms.repositories import content, setup_keys, users
from portfolio_cms.schemas.auth import Register

logger = logging.getLogger(__name__)

def authenticate(db: Session, username: str, password: str) -> User:
    """
    Look up and verify a user. Unknown usernames and wrong passwords fail the
    same way, with the same message.
    """
    user = users.get_by_username(db, username)
    if user is None:
        verify_password(password, DUMMY_PASSWORD_HASH)
        logger.info(f"Failed login for unknown user '{username}'")
        raise AuthException("Invalid credentials")

    if not verify_password(password, user.password):
        logger.info(f"Failed login for '{username}'")
        raise AuthException("Invalid credentials")

    return user

def _site_setup_key_matches(db: Session, supplied: str) -> bool:
    config = content.site_config.get(db)
    return hmac.compare_digest(supplied.encode("utf-8"), config.setup_key.encode("utf-8"))

def register(db: Session, data: Register) -> User:
    """
    Create a user account.

    Admin accounts need the site setup key or an unused single-use setup key.
    Regular accounts are refused until at least one admin exists, so the first
    account on a fresh install is always an admin.
    """
    if users.get_by_username(db, data.username):
        raise ConflictException("Username already exists")
    if users.get_by_email(db, data.email):
        raise ConflictException("Email already exists")

    invitation = None
    if data.is_admin:
        supplied = data.setup_key or ""
        if not supplied:
            raise ForbiddenException("Invalid setup key")
        if not _site_setup_key_matches(db, supplied):
            invitation = setup_keys.find_unused(db, supplied)
            if invitation is None:
                raise ForbiddenException("Invalid setup key")
    elif not users.admin_exists(db):
        raise ValidationException("Please create an admin account first")

    user = users.add_user(
        db,
        username=data.username,
        email=data.email,
        password_hash=get_password_hash(data.password),
        is_admin=data.is_admin,
    )

    if invitation is not None and not setup_keys.consume(db, invitation):
        db.rollback()
        raise ForbiddenException("Invalid setup key")

    try:
        db.commit()
    except IntegrityError:
        # Lost a race with another registration for the same username or email
        db.rollback()
        raise ConflictException("Username or email already exists")
    db.refresh(user)
    logger.info(f"Registered {'admin' if user.is_admin else 'user'} '{user.username}' (id={user.id})")
    return user
