from __future__ import annotations

from fastapi import Depends, FastAPI, Form, Response
from fastapi.responses import JSONResponse

from .handler import get_relay_handler
from .relay import RelayHandler
from .sms import InboundSms, RelayOutcome

app = FastAPI(title="sms-relay", version="0.1.0")


def inbound_form(
    From_: str = Form(..., alias="From"),
    To: str = Form(...),
    Body: str = Form(...),
) -> InboundSms:
    """Twilio posts the message as form fields From / To / Body."""
    return InboundSms(from_=From_, to=To, body=Body)


def _status(outcome: RelayOutcome) -> int:
    # 502: we got the webhook fine, the upstream send is what failed.
    return 200 if outcome.succeeded else 502


def _to_response(outcome: RelayOutcome) -> Response:
    if isinstance(outcome.payload, str):
        return Response(
            content=outcome.payload,
            media_type="application/xml",
            status_code=_status(outcome),
        )
    return JSONResponse(outcome.payload, status_code=_status(outcome))


@app.get("/health")
def health() -> JSONResponse:
    return JSONResponse({"status": "ok"})


@app.post("/sms/reply")
def sms_reply(
    inbound: InboundSms = Depends(inbound_form),
    handler: RelayHandler = Depends(get_relay_handler),
) -> Response:
    """Text the sender back from the number they wrote to, same body."""
    return _to_response(handler.reply(inbound))


@app.post("/sms/forward")
def sms_forward(
    inbound: InboundSms = Depends(inbound_form),
    handler: RelayHandler = Depends(get_relay_handler),
) -> Response:
    """
    Forward the message to FORWARDING_PHONE_NUMBER.

    Always answers with empty TwiML, whether or not the forward went through.
    """
    return _to_response(handler.forward(inbound))


@app.post("/sms/inbound")
def sms_inbound(
    inbound: InboundSms = Depends(inbound_form),
    handler: RelayHandler = Depends(get_relay_handler),
) -> Response:
    """Twilio-style SMS webhook; variant picked by RELAY_MODE."""
    return _to_response(handler.relay(inbound))
