from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field

# Empty TwiML: acknowledges the webhook without Twilio sending an auto-reply.
EMPTY_TWIML: Final[str] = '<?xml version="1.0" encoding="UTF-8"?><Response></Response>'


class InboundSms(BaseModel):
    """
    A received message as delivered by the hosting platform.

    Only presence is checked: phone numbers and body are used as given.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    from_: str = Field(alias="from")
    to: str
    body: str

    @classmethod
    def from_event(cls, event: Mapping[str, Any]) -> InboundSms:
        return cls.model_validate(dict(event))


class OutboundSms(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    to: str
    from_: str = Field(alias="from")
    body: str


@dataclass(frozen=True)
class SendSuccess:
    sid: str
    date_created: str


@dataclass(frozen=True)
class SendFailure:
    # Whatever the remote call raised; never inspected, only logged.
    error: Exception


SendResult = SendSuccess | SendFailure


@dataclass(frozen=True)
class RelayOutcome:
    succeeded: bool
    payload: Any
