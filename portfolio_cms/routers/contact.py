from fastapi import APIRouter, Depends, status
from typing import List
from sqlalchemy.orm import Session
from portfolio_cms.core.exceptions import DependencyException
from portfolio_cms.database import get_db
from portfolio_cms.repositories import content
from portfolio_cms.schemas.auth import MessageResponse
from portfolio_cms.schemas.contact import ContactMessageCreate, ContactMessageResponse, UnreadCount
from portfolio_cms.services import contact_notifier

router = APIRouter()
admin_router = APIRouter()

@router.post("/contact", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def send_contact_message(data: ContactMessageCreate, db: Session = Depends(get_db)):
    submission = contact_notifier.submit(db, data)
    if submission.notified is False:
        # The message is stored either way; only the notification failed
        raise DependencyException("Message saved but the notification email could not be sent")
    return {"message": "Message sent successfully"}

@admin_router.get("/contact-messages", response_model=List[ContactMessageResponse])
def get_contact_messages(db: Session = Depends(get_db)):
    return content.contact_messages.get_all(db)

@admin_router.get("/contact-messages/unread-count", response_model=UnreadCount)
def count_unread_messages(db: Session = Depends(get_db)):
    return {"count": content.contact_messages.count_unread(db)}

@admin_router.patch("/contact-messages/{message_id}/read", response_model=ContactMessageResponse)
def mark_message_read(message_id: int, db: Session = Depends(get_db)):
    return content.contact_messages.mark_read(db, message_id)

@admin_router.delete("/contact-messages/{message_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_contact_message(message_id: int, db: Session = Depends(get_db)):
    content.contact_messages.delete(db, message_id)
    return None
