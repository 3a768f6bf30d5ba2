from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from twilio.rest import Client

from .config import Settings
from .logging_utils import logger
from .sms import (
    EMPTY_TWIML,
    InboundSms,
    OutboundSms,
    RelayOutcome,
    SendFailure,
    SendSuccess,
)
from .twilio_client import get_twilio_client, send_sms


def forward_body(event: InboundSms) -> str:
    return f"Message from {event.from_}: {event.body}"


class RelayHandler:
    """
    Relays one inbound SMS per call through a single Twilio send.

    Two flavours:
      - reply:   answer the sender, from the number they texted, with the same body
      - forward: pass the message on to a fixed personal number, prefixed with the sender

    Settings are injected; the Twilio client is built from them on first use
    unless one is supplied (tests pass a fake).
    """

    def __init__(self, settings: Settings, client: Client | None = None) -> None:
        self.settings = settings
        self._client = client

    @property
    def client(self) -> Client:
        if self._client is None:
            self._client = get_twilio_client(self.settings)
        return self._client

    # --- request builders ---

    def build_reply(self, event: InboundSms) -> OutboundSms:
        return OutboundSms(to=event.from_, from_=event.to, body=event.body)

    def build_forward(self, event: InboundSms) -> OutboundSms:
        if not self.settings.forwarding_phone_number:
            raise RuntimeError("FORWARDING_PHONE_NUMBER is not configured")
        return OutboundSms(
            to=self.settings.forwarding_phone_number,
            from_=event.to,
            body=forward_body(event),
        )

    # --- variants ---

    def reply(self, event: InboundSms) -> RelayOutcome:
        result = send_sms(self.client, self.build_reply(event))

        if isinstance(result, SendSuccess):
            logger.info("Success! The SID for this SMS message is:")
            logger.info(result.sid)
            logger.info("Message sent on:")
            logger.info(result.date_created)
            return RelayOutcome(succeeded=True, payload={})

        logger.info("Oops! There was an error.")
        logger.info(result.error)
        return RelayOutcome(succeeded=False, payload={})

    def forward(self, event: InboundSms) -> RelayOutcome:
        request = self.build_forward(event)
        result = send_sms(self.client, request)

        if isinstance(result, SendFailure):
            logger.info(result.error)
            return RelayOutcome(succeeded=False, payload=EMPTY_TWIML)

        logger.info("%s %s %s", result.sid, result.date_created, request.body)
        return RelayOutcome(succeeded=True, payload=EMPTY_TWIML)

    def relay(self, event: InboundSms | Mapping[str, Any]) -> RelayOutcome:
        """Run the variant picked by RELAY_MODE."""
        if not isinstance(event, InboundSms):
            event = InboundSms.from_event(event)

        if self.settings.relay_mode == "forward":
            return self.forward(event)
        return self.reply(event)
