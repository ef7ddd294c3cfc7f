from fastapi import APIRouter, Depends, status
from typing import List, Optional
from sqlalchemy.orm import Session
from portfolio_cms.database import get_db
from portfolio_cms.repositories import setup_keys
from portfolio_cms.schemas.setup_key import SetupKeyCreate, SetupKeyResponse

admin_router = APIRouter()

@admin_router.get("/setup-keys", response_model=List[SetupKeyResponse])
def get_setup_keys(db: Session = Depends(get_db)):
    return setup_keys.get_all(db)

@admin_router.post("/setup-keys", response_model=SetupKeyResponse, status_code=status.HTTP_201_CREATED)
def issue_setup_key(data: Optional[SetupKeyCreate] = None, db: Session = Depends(get_db)):
    """Issue a single-use key another person can register an admin account with."""
    return setup_keys.issue(db, data.key if data else None)

@admin_router.delete("/setup-keys/{key_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_setup_key(key_id: int, db: Session = Depends(get_db)):
    setup_keys.delete(db, key_id)
    return None
