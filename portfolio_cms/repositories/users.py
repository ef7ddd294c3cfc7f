from typing import Optional
from sqlalchemy.orm import Session
from portfolio_cms.models.user import User

def get_user(db: Session, user_id: int) -> Optional[User]:
    return db.get(User, user_id)

def get_by_username(db: Session, username: str) -> Optional[User]:
    return db.query(User).filter(User.username == username).first()

def get_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == email).first()

def admin_exists(db: Session) -> bool:
    return db.query(User.id).filter(User.is_admin == True).first() is not None  # noqa: E712

def add_user(db: Session, username: str, email: str, password_hash: str, is_admin: bool) -> User:
    """Stage a new user; the caller commits."""
    user = User(username=username, email=email, password=password_hash, is_admin=is_admin)
    db.add(user)
    return user
