import logging
import smtplib
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from typing import Optional
import requests
import resend
from portfolio_cms.config import settings

logger = logging.getLogger(__name__)

def _send_with_resend(to_email: str, subject: str, message: str, html_content: Optional[str]) -> None:
    resend.api_key = settings.RESEND_API_KEY
    params = {
        "from": settings.EMAIL_FROM,
        "to": [to_email],
        "subject": subject,
        "text": message,
    }
    if html_content:
        params["html"] = html_content

    email = resend.Emails.send(params)
    logger.info(f"[RESEND] Email sent. ID: {email['id']}")

def _send_with_http_api(to_email: str, subject: str, message: str, html_content: Optional[str]) -> None:
    response = requests.post(
        settings.EMAIL_SERVICE_URL,
        json={
            "to": to_email,
            "from": settings.EMAIL_FROM,
            "subject": subject,
            "text": message,
            "html": html_content or message,
        },
        headers={"Authorization": f"Bearer {settings.EMAIL_API_KEY or ''}"},
        timeout=10,
    )
    response.raise_for_status()
    logger.info(f"[HTTP] Email accepted by {settings.EMAIL_SERVICE_URL}")

def _send_with_smtp(to_email: str, subject: str, message: str, html_content: Optional[str]) -> None:
    msg = MIMEMultipart("alternative")
    msg["Subject"] = subject
    msg["From"] = settings.EMAIL_FROM
    msg["To"] = to_email
    msg.attach(MIMEText(message, "plain"))
    msg.attach(MIMEText(html_content or message, "html"))

    if settings.SMTP_SECURE:
        server = smtplib.SMTP_SSL(settings.SMTP_HOST, settings.SMTP_PORT, timeout=10)
    else:
        server = smtplib.SMTP(settings.SMTP_HOST, settings.SMTP_PORT, timeout=10)
    with server:
        if not settings.SMTP_SECURE:
            server.starttls()
        server.login(settings.SMTP_USER, settings.SMTP_PASSWORD)
        server.send_message(msg)
    logger.info(f"[SMTP] Email sent through {settings.SMTP_HOST}")

def get_transport():
    """The configured delivery function, or None when no provider is set up."""
    if settings.RESEND_API_KEY:
        return _send_with_resend
    if settings.EMAIL_SERVICE_URL:
        return _send_with_http_api
    if settings.smtp_configured:
        return _send_with_smtp
    return None

def send_email(to_email: str, subject: str, message: str, html_content: str = None) -> bool:
    """
    Send one email through the configured provider.

    Returns False instead of raising on any delivery problem, including no
    provider being configured; the caller decides what a failure means.
    """
    transport = get_transport()
    if transport is None:
        logger.warning("No email provider configured (RESEND_API_KEY, EMAIL_SERVICE_URL or SMTP_*); email not sent")
        return False

    try:
        logger.info(f"Sending email to {to_email}")
        transport(to_email, subject, message, html_content)
        return True
    except Exception as e:
        logger.error(f"Error sending email to {to_email}: {e}")
        return False
