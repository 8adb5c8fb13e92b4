import os
import smtplib
import ssl
from contextlib import contextmanager
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from typing import Iterator

import requests
from jinja2 import Environment, FileSystemLoader, select_autoescape

from resource_hub.platform.config import settings
from resource_hub.platform.logger import get_logger

logger = get_logger("email_service")

current_dir = os.path.dirname(os.path.abspath(__file__))
template_dir = os.path.join(current_dir, "../templates")

if not os.path.exists(template_dir):
    template_dir = os.path.join(os.getcwd(), "resource_hub/platform/templates")

env = Environment(loader=FileSystemLoader(template_dir), autoescape=select_autoescape(["html"]))


class EmailDeliveryError(Exception):
    """Raised when a message could not be handed to the relay or the SMTP server."""


def render_template(template_name: str, /, **context) -> str:
    return env.get_template(template_name).render(**context)


def relay_configured() -> bool:
    return bool(settings.EMAIL_RELAY_URL and settings.EMAIL_RELAY_API_KEY)


def send_email(to_email: str, subject: str, body: str) -> None:
    """
    Deliver an HTML email.

    The HTTP relay is used when configured, with direct SMTP as the fallback.
    Raises EmailDeliveryError when the last transport tried also fails.
    """
    if not relay_configured():
        logger.warning("Email relay not configured, attempting direct SMTP")
        send_email_direct_smtp(to_email, subject, body)
        return

    try:
        send_email_via_relay(to_email, subject, body)
    except EmailDeliveryError as e:
        logger.error(f"Email relay failed: {str(e)}")
        logger.info("Attempting direct SMTP as fallback...")
        send_email_direct_smtp(to_email, subject, body)


def send_email_via_relay(to_email: str, subject: str, body: str) -> None:
    try:
        response = requests.post(
            settings.EMAIL_RELAY_URL,
            json={
                "to_email": to_email,
                "subject": subject,
                "body": body,
                "from_address": settings.MAIL_FROM_ADDRESS,
            },
            headers={"X-API-Key": settings.EMAIL_RELAY_API_KEY},
            timeout=settings.EMAIL_RELAY_TIMEOUT,
        )
        response.raise_for_status()
    except requests.exceptions.Timeout as e:
        raise EmailDeliveryError(f"Email relay timed out for {to_email}") from e
    except requests.exceptions.RequestException as e:
        if getattr(e, "response", None) is not None:
            logger.error(f"Relay responded {e.response.status_code}: {e.response.text}")
        raise EmailDeliveryError(f"Email relay service error: {str(e)}") from e

    logger.info(f"Email sent via relay to {to_email}")


def build_message(to_email: str, subject: str, body: str) -> MIMEMultipart:
    msg = MIMEMultipart("alternative")
    msg["Subject"] = subject
    msg["From"] = f"{settings.MAIL_FROM_NAME} <{settings.MAIL_FROM_ADDRESS}>"
    msg["To"] = to_email
    msg.attach(MIMEText(body, "html"))
    return msg


@contextmanager
def smtp_connection() -> Iterator[smtplib.SMTP]:
    """Logged-in SMTP session. Port 465 uses implicit TLS, anything else may STARTTLS."""
    host, port = settings.MAIL_HOST, settings.MAIL_PORT

    if port == 465:
        connection = smtplib.SMTP_SSL(host, port, context=ssl.create_default_context())
    else:
        connection = smtplib.SMTP(host, port)

    with connection as server:
        if port != 465:
            server.ehlo()
            if str(settings.MAIL_ENCRYPTION).upper() in ["TLS", "TRUE"]:
                server.starttls()
                server.ehlo()
        server.login(settings.MAIL_USERNAME, settings.MAIL_PASSWORD)
        yield server


def send_email_direct_smtp(to_email: str, subject: str, body: str) -> None:
    msg = build_message(to_email, subject, body)

    try:
        with smtp_connection() as server:
            server.sendmail(settings.MAIL_FROM_ADDRESS, to_email, msg.as_string())
    except (smtplib.SMTPException, OSError) as e:
        logger.error(f"SMTP delivery to {to_email} failed: {str(e)}")
        raise EmailDeliveryError(str(e)) from e

    logger.info(f"Email sent via SMTP to {to_email}")
