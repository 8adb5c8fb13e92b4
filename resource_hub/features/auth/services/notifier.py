from dataclasses import dataclass
from typing import Optional

from fastapi.concurrency import run_in_threadpool

from resource_hub.platform.config import settings
from resource_hub.platform.logger import get_logger
from resource_hub.platform.services.email import render_template, send_email

logger = get_logger("notifier")


@dataclass(frozen=True)
class NotificationResult:
    success: bool
    error: Optional[str] = None


class EmailNotifier:
    """Delivers verification codes and welcome messages by email."""

    def __init__(self, expiration_minutes: int = settings.OTP_EXPIRE_MINUTES):
        self.expiration_minutes = expiration_minutes

    async def send_code(self, email: str, code: str, name: str) -> NotificationResult:
        html_content = render_template(
            "verify_otp.html",
            app_name=settings.APP_NAME,
            name=name,
            otp_code=code,
            expiration_minutes=self.expiration_minutes,
        )
        return await self._deliver(email, f"Verify Your Account - {settings.APP_NAME}", html_content)

    async def send_welcome(self, email: str, name: str) -> NotificationResult:
        html_content = render_template(
            "welcome.html",
            app_name=settings.APP_NAME,
            name=name,
            dashboard_url=f"{settings.FRONTEND_URL}/dashboard",
        )
        return await self._deliver(email, f"Welcome to {settings.APP_NAME}!", html_content)

    async def _deliver(self, email: str, subject: str, body: str) -> NotificationResult:
        try:
            await run_in_threadpool(send_email, email, subject, body)
        except Exception as e:
            logger.error(f"Error sending '{subject}' to {email}: {str(e)}")
            return NotificationResult(success=False, error=str(e))

        logger.info(f"'{subject}' sent successfully to {email}")
        return NotificationResult(success=True)
