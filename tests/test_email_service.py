import smtplib
from unittest.mock import MagicMock, patch

import pytest
import requests

from resource_hub.features.auth.services.notifier import EmailNotifier
from resource_hub.platform.config import settings
from resource_hub.platform.services import email as email_service
from resource_hub.platform.services.email import EmailDeliveryError


@pytest.fixture
def relay(monkeypatch):
    monkeypatch.setattr(settings, "EMAIL_RELAY_URL", "https://relay.example.com/send")
    monkeypatch.setattr(settings, "EMAIL_RELAY_API_KEY", "relay-key")


@pytest.fixture
def no_relay(monkeypatch):
    monkeypatch.setattr(settings, "EMAIL_RELAY_URL", "")
    monkeypatch.setattr(settings, "EMAIL_RELAY_API_KEY", "")


def test_verification_template_contains_code():
    html = email_service.render_template(
        "verify_otp.html", app_name="College Resource Hub", name="Alice", otp_code="482913", expiration_minutes=10
    )

    assert "482913" in html
    assert "Alice" in html
    assert "10" in html


def test_template_escapes_user_input():
    html = email_service.render_template(
        "welcome.html", app_name="College Resource Hub", name="<script>x</script>", dashboard_url="http://x"
    )

    assert "<script>x</script>" not in html


def test_send_uses_relay_when_configured(relay):
    with patch("resource_hub.platform.services.email.requests.post") as mock_post, patch(
        "resource_hub.platform.services.email.send_email_direct_smtp"
    ) as mock_smtp:
        mock_post.return_value = MagicMock(status_code=200)

        email_service.send_email("alice@college.edu", "Hi", "<p>Hi</p>")

    mock_post.assert_called_once()
    assert mock_post.call_args.kwargs["json"]["to_email"] == "alice@college.edu"
    assert mock_post.call_args.kwargs["headers"]["X-API-Key"] == "relay-key"
    mock_smtp.assert_not_called()


def test_relay_failure_falls_back_to_smtp(relay):
    with patch(
        "resource_hub.platform.services.email.requests.post",
        side_effect=requests.exceptions.ConnectionError("down"),
    ), patch("resource_hub.platform.services.email.send_email_direct_smtp") as mock_smtp:
        email_service.send_email("alice@college.edu", "Hi", "<p>Hi</p>")

    mock_smtp.assert_called_once_with("alice@college.edu", "Hi", "<p>Hi</p>")


def test_relay_timeout_is_delivery_error(relay):
    with patch(
        "resource_hub.platform.services.email.requests.post",
        side_effect=requests.exceptions.Timeout(),
    ):
        with pytest.raises(EmailDeliveryError):
            email_service.send_email_via_relay("alice@college.edu", "Hi", "<p>Hi</p>")


def test_smtp_without_relay(no_relay, monkeypatch):
    monkeypatch.setattr(settings, "MAIL_PORT", 587)
    monkeypatch.setattr(settings, "MAIL_ENCRYPTION", "tls")

    with patch("resource_hub.platform.services.email.smtplib.SMTP") as mock_smtp_cls:
        server = mock_smtp_cls.return_value.__enter__.return_value

        email_service.send_email("alice@college.edu", "Hi", "<p>Hi</p>")

    server.starttls.assert_called_once()
    server.login.assert_called_once_with(settings.MAIL_USERNAME, settings.MAIL_PASSWORD)
    server.sendmail.assert_called_once()
    assert server.sendmail.call_args.args[1] == "alice@college.edu"


def test_smtp_error_is_delivery_error(no_relay):
    with patch(
        "resource_hub.platform.services.email.smtplib.SMTP",
        side_effect=smtplib.SMTPConnectError(421, "busy"),
    ):
        with pytest.raises(EmailDeliveryError):
            email_service.send_email("alice@college.edu", "Hi", "<p>Hi</p>")


def test_build_message_headers():
    msg = email_service.build_message("alice@college.edu", "Verify", "<p>code</p>")

    assert msg["To"] == "alice@college.edu"
    assert msg["Subject"] == "Verify"
    assert settings.MAIL_FROM_ADDRESS in msg["From"]


async def test_notifier_reports_success():
    with patch("resource_hub.features.auth.services.notifier.send_email") as mock_send:
        result = await EmailNotifier(expiration_minutes=10).send_code("alice@college.edu", "123456", "Alice")

    assert result.success is True
    assert result.error is None
    to_email, subject, body = mock_send.call_args.args
    assert to_email == "alice@college.edu"
    assert "123456" in body


async def test_notifier_turns_delivery_errors_into_results():
    with patch(
        "resource_hub.features.auth.services.notifier.send_email",
        side_effect=EmailDeliveryError("connection refused"),
    ):
        result = await EmailNotifier().send_welcome("alice@college.edu", "Alice")

    assert result.success is False
    assert "connection refused" in result.error
