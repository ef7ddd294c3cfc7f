import secrets
from typing import List, Optional
from sqlalchemy.orm import Session
from portfolio_cms.core.exceptions import ConflictException
from portfolio_cms.core.sessions import utcnow
from portfolio_cms.models.setup_key import SetupKey

def get_all(db: Session) -> List[SetupKey]:
    return db.query(SetupKey).order_by(SetupKey.id).all()

def issue(db: Session, key: Optional[str] = None) -> SetupKey:
    key = key or secrets.token_urlsafe(24)
    if db.query(SetupKey).filter(SetupKey.key == key).first():
        raise ConflictException("Setup key already exists")
    row = SetupKey(key=key)
    db.add(row)
    db.commit()
    db.refresh(row)
    return row

def find_unused(db: Session, key: str) -> Optional[SetupKey]:
    return db.query(SetupKey).filter(SetupKey.key == key, SetupKey.used == False).first()  # noqa: E712

def consume(db: Session, row: SetupKey) -> bool:
    """
    Mark ``row`` used without committing.

    The UPDATE is conditional on ``used`` still being false, so of two
    registrations racing for the same key only one gets True back.
    """
    updated = (
        db.query(SetupKey)
        .filter(SetupKey.id == row.id, SetupKey.used == False)  # noqa: E712
        .update({SetupKey.used: True, SetupKey.used_at: utcnow()}, synchronize_session=False)
    )
    return updated == 1

def delete(db: Session, key_id: int) -> None:
    row = db.get(SetupKey, key_id)
    if row is None:
        return
    db.delete(row)
    db.commit()
