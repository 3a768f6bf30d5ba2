from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

import pytest

from sms_relay.config import Settings, get_settings
from sms_relay.handler import get_relay_handler
from sms_relay.relay import RelayHandler

SENDER = "+15551234567"
TWILIO_NUMBER = "+15557654321"
FORWARD_TO = "+15559999999"

EVENT = {"from": SENDER, "to": TWILIO_NUMBER, "body": "hello"}


class FakeMessage:
    def __init__(self, sid: str, date_created: Any) -> None:
        self.sid = sid
        self.date_created = date_created


class FakeMessages:
    """Stands in for client.messages; records every create() call."""

    def __init__(self, error: Exception | None = None) -> None:
        self.error = error
        self.calls: list[dict[str, Any]] = []

    def create(self, **kwargs: Any) -> FakeMessage:
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return FakeMessage("SM123", datetime(2024, 1, 1, tzinfo=UTC))


class FakeClient:
    def __init__(self, error: Exception | None = None) -> None:
        self.messages = FakeMessages(error=error)


class RecordingContext:
    def __init__(self) -> None:
        self.succeeded: list[Any] = []
        self.failed: list[Any] = []

    def succeed(self, payload: Any) -> None:
        self.succeeded.append(payload)

    def fail(self, payload: Any) -> None:
        self.failed.append(payload)


@pytest.fixture(autouse=True)
def clear_caches() -> Any:
    get_settings.cache_clear()
    get_relay_handler.cache_clear()
    yield
    get_settings.cache_clear()
    get_relay_handler.cache_clear()


@pytest.fixture
def settings() -> Settings:
    return Settings(
        twilio_account_sid="AC00000000000000000000000000000000",
        twilio_auth_token="secret",
        forwarding_phone_number=FORWARD_TO,
        relay_mode="reply",
        log_level="INFO",
    )


@pytest.fixture
def fake_client() -> FakeClient:
    return FakeClient()


@pytest.fixture
def failing_client() -> FakeClient:
    return FakeClient(error=OSError("connection reset"))


@pytest.fixture
def relay_handler(settings: Settings, fake_client: FakeClient) -> RelayHandler:
    return RelayHandler(settings, client=fake_client)  # type: ignore[arg-type]
