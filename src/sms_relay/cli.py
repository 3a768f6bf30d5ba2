from __future__ import annotations

import argparse
import json
import sys

from .config import get_settings
from .logging_utils import configure_logging
from .relay import RelayHandler
from .sms import InboundSms


def main(argv: list[str] | None = None) -> int:
    """
    Relay one message from the command line, e.g.

      sms-relay --from +15551234567 --to +15557654321 --body hello --mode forward

    Uses the same TWILIO_* settings as the deployed function, so it really sends.
    """
    parser = argparse.ArgumentParser(prog="sms-relay")
    parser.add_argument("--from", dest="from_", required=True, help="sender number")
    parser.add_argument("--to", required=True, help="number the message was sent to")
    parser.add_argument("--body", required=True)
    parser.add_argument("--mode", choices=["reply", "forward"], default=None)
    args = parser.parse_args(argv)

    configure_logging()
    settings = get_settings()
    if args.mode is not None:
        settings = settings.model_copy(update={"relay_mode": args.mode})

    event = InboundSms(from_=args.from_, to=args.to, body=args.body)
    outcome = RelayHandler(settings).relay(event)

    payload = outcome.payload
    print(payload if isinstance(payload, str) else json.dumps(payload))
    return 0 if outcome.succeeded else 1


if __name__ == "__main__":
    sys.exit(main())
