from sqlalchemy.orm import Session
from portfolio_cms.models.contact import ContactMessage
from portfolio_cms.repositories.base import CRUDRepository

class ContactMessageRepository(CRUDRepository):
    """Append-only inbox; the only mutation is flipping ``read`` to True."""

    def __init__(self):
        super().__init__(
            ContactMessage,
            "Message",
            order_by=[ContactMessage.created_at.desc(), ContactMessage.id.desc()],
        )

    def mark_read(self, db: Session, message_id: int) -> ContactMessage:
        message = self.get(db, message_id)
        if not message.read:
            message.read = True
            db.commit()
            db.refresh(message)
        return message

    def count_unread(self, db: Session) -> int:
        return db.query(ContactMessage).filter(ContactMessage.read == False).count()  # noqa: E712
