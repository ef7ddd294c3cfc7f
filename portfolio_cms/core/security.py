import hashlib
import hmac
import secrets
from typing import Optional
from fastapi import Depends
from sqlalchemy.orm import Session
from portfolio_cms.core.exceptions import AuthException, ForbiddenException, MalformedPasswordHash
from portfolio_cms.core.sessions import session_cookie, restore_user
from portfolio_cms.database import get_db
from portfolio_cms.models.user import User

SALT_BYTES = 16
KEY_LENGTH = 64
SCRYPT_N = 16384
SCRYPT_R = 8
SCRYPT_P = 1

def _derive_key(password: str, salt: str) -> bytes:
    return hashlib.scrypt(
        password.encode("utf-8"),
        salt=salt.encode("utf-8"),
        n=SCRYPT_N,
        r=SCRYPT_R,
        p=SCRYPT_P,
        dklen=KEY_LENGTH,
    )

def get_password_hash(password: str) -> str:
    salt = secrets.token_hex(SALT_BYTES)
    return f"{_derive_key(password, salt).hex()}.{salt}"

def verify_password(plain_password: str, hashed_password: str) -> bool:
    key_hex, sep, salt = hashed_password.partition(".")
    if not sep or not key_hex or not salt:
        raise MalformedPasswordHash("Stored password hash has no salt separator")
    try:
        stored_key = bytes.fromhex(key_hex)
    except ValueError as e:
        raise MalformedPasswordHash("Stored password hash is not hex encoded") from e

    return hmac.compare_digest(stored_key, _derive_key(plain_password, salt))

# Verified against when the username does not exist so both login failures take equally long
DUMMY_PASSWORD_HASH = get_password_hash(secrets.token_hex(8))

def authorize_admin(user: Optional[User]) -> User:
    """
    Authorization gate for admin routes.

    Anonymous callers get 401, authenticated non-admins get 403, admins pass
    through unchanged.
    """
    if user is None:
        raise AuthException("Not authenticated")
    if not user.is_admin:
        raise ForbiddenException("Access denied")
    return user

def get_current_user_optional(
    token: Optional[str] = Depends(session_cookie),
    db: Session = Depends(get_db)
) -> Optional[User]:
    """Restored user for the request's session cookie, or None for visitors."""
    return restore_user(db, token)

def get_current_user(user: Optional[User] = Depends(get_current_user_optional)) -> User:
    if user is None:
        raise AuthException("Not authenticated")
    return user

def require_admin(user: Optional[User] = Depends(get_current_user_optional)) -> User:
    return authorize_admin(user)
