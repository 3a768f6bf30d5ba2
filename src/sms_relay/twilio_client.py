from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from twilio.base.exceptions import TwilioException
from twilio.rest import Client

from .config import Settings, get_settings
from .sms import OutboundSms, SendFailure, SendResult, SendSuccess


def get_twilio_client(settings: Settings | None = None) -> Client:
    settings = settings or get_settings()

    if not settings.twilio_account_sid or not settings.twilio_auth_token:
        raise RuntimeError(
            "Twilio credentials are not configured (TWILIO_ACCOUNT_SID / TWILIO_AUTH_TOKEN)"
        )

    return Client(settings.twilio_account_sid, settings.twilio_auth_token)


def format_date_created(value: Any) -> str:
    """Render Twilio's date_created as e.g. 2024-01-01T00:00:00Z."""
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(UTC)
        return value.strftime("%Y-%m-%dT%H:%M:%SZ")
    return str(value)


def send_sms(client: Client, request: OutboundSms) -> SendResult:
    """
    Issue exactly one outbound SMS.

    Provider errors (bad credentials, invalid number, rejection, rate limit)
    and network errors all come back as SendFailure. Nothing is retried.
    """
    try:
        message = client.messages.create(
            to=request.to,
            from_=request.from_,
            body=request.body,
        )
    except (TwilioException, OSError) as exc:
        return SendFailure(error=exc)

    return SendSuccess(sid=message.sid, date_created=format_date_created(message.date_created))
