from __future__ import annotations

from collections.abc import Callable, Mapping
from functools import lru_cache
from typing import Any, Protocol

from .config import get_settings
from .logging_utils import configure_logging
from .relay import RelayHandler
from .sms import InboundSms, RelayOutcome


class Context(Protocol):
    """Terminal callbacks of an invocation. Exactly one gets called, once."""

    def succeed(self, payload: Any) -> None: ...

    def fail(self, payload: Any) -> None: ...


class RelayFailed(Exception):
    """Raised by lambda_handler so the platform records a failed invocation."""

    def __init__(self, payload: Any) -> None:
        super().__init__("outbound SMS send failed")
        self.payload = payload


@lru_cache
def get_relay_handler() -> RelayHandler:
    configure_logging()
    return RelayHandler(get_settings())


def _settle(context: Context, outcome: RelayOutcome) -> None:
    if outcome.succeeded:
        context.succeed(outcome.payload)
    else:
        context.fail(outcome.payload)


def _run(
    pick: Callable[[RelayHandler], Callable[[InboundSms], RelayOutcome]],
    event: Mapping[str, Any],
    context: Context,
    handler: RelayHandler | None,
) -> None:
    handler = handler or get_relay_handler()
    inbound = InboundSms.from_event(event)
    _settle(context, pick(handler)(inbound))


def handle(event: Mapping[str, Any], context: Context, handler: RelayHandler | None = None) -> None:
    """
    Entry point for platforms that hand us succeed/fail callbacks.

    The variant comes from RELAY_MODE. Bad input and missing configuration
    raise before any callback fires and are left for the platform to report.
    """
    _run(lambda h: h.relay, event, context, handler)


def reply_handle(
    event: Mapping[str, Any], context: Context, handler: RelayHandler | None = None
) -> None:
    _run(lambda h: h.reply, event, context, handler)


def forward_handle(
    event: Mapping[str, Any], context: Context, handler: RelayHandler | None = None
) -> None:
    _run(lambda h: h.forward, event, context, handler)


def lambda_handler(event: Mapping[str, Any], context: object) -> Any:
    """
    AWS Lambda (Python runtime) entry point.

    Returns the payload on success; raises RelayFailed on a failed send.
    """
    outcome = get_relay_handler().relay(event)
    if not outcome.succeeded:
        raise RelayFailed(outcome.payload)
    return outcome.payload
