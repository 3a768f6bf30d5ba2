from __future__ import annotations

import os
from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

RelayMode = Literal["reply", "forward"]
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _env(name: str) -> str | None:
    # Treat an empty variable the same as an unset one.
    return os.getenv(name) or None


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True, validate_default=True)

    # --- Twilio credentials (required to send anything) ---
    twilio_account_sid: str | None = Field(default_factory=lambda: _env("TWILIO_ACCOUNT_SID"))
    twilio_auth_token: str | None = Field(default_factory=lambda: _env("TWILIO_AUTH_TOKEN"))

    # Fixed destination for the "forward" variant
    forwarding_phone_number: str | None = Field(
        default_factory=lambda: _env("FORWARDING_PHONE_NUMBER")
    )

    # "reply"   -> answer the sender from the number they texted
    # "forward" -> pass the message on to forwarding_phone_number
    relay_mode: RelayMode = Field(default_factory=lambda: os.getenv("RELAY_MODE", "reply"))

    log_level: LogLevel = Field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())


@lru_cache
def get_settings() -> Settings:
    return Settings()
