import html
import logging
from dataclasses import dataclass
from typing import Optional
from sqlalchemy.orm import Session
from portfolio_cms.core import email_service
from portfolio_cms.models.contact import ContactMessage
from portfolio_cms.repositories import content
from portfolio_cms.schemas.contact import ContactMessageCreate

logger = logging.getLogger(__name__)

@dataclass
class ContactSubmission:
    message: ContactMessage
    # None when there was nobody to notify or no provider to notify with
    notified: Optional[bool]

def build_notification(data: ContactMessageCreate):
    subject = f"New Contact Message: {data.subject}"

    text_content = (
        f"Name: {data.name}\n"
        f"Email: {data.email}\n"
        f"Subject: {data.subject}\n"
        f"\n"
        f"Message:\n"
        f"{data.message}\n"
    )

    body = html.escape(data.message).replace("\n", "<br>")
    html_content = f"""
    <h2>New Contact Message</h2>
    <p><strong>From:</strong> {html.escape(data.name)} ({html.escape(data.email)})</p>
    <p><strong>Subject:</strong> {html.escape(data.subject)}</p>
    <h3>Message:</h3>
    <p>{body}</p>
    """

    return subject, text_content, html_content

def submit(db: Session, data: ContactMessageCreate) -> ContactSubmission:
    """
    Store a contact form message and forward it to the site owner.

    The message is committed before any email is attempted; a failed
    notification is reported through ``notified`` and never undoes the insert.
    """
    message = content.contact_messages.create(db, data.model_dump())
    logger.info(f"Stored contact message {message.id} from {data.email}")

    info = content.contact_info.get(db)
    if not info.email:
        logger.info("Contact info has no email address; skipping notification")
        return ContactSubmission(message=message, notified=None)

    if email_service.get_transport() is None:
        logger.warning(f"No email provider configured; contact message {message.id} was stored without notification")
        return ContactSubmission(message=message, notified=None)

    subject, text_content, html_content = build_notification(data)
    sent = email_service.send_email(info.email, subject, text_content, html_content)
    if not sent:
        logger.error(f"Notification for contact message {message.id} could not be delivered")
    return ContactSubmission(message=message, notified=sent)
